from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple
import os

import httpx
from dotenv import load_dotenv

from alarm_notifier.errors import ConfigError

# .env 읽어오기
load_dotenv()

DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class NotifierSettings:
    webhook_url: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS  # Slack POST 타임아웃 (초)
    verify_ssl: bool = True
    log_level: str = "INFO"
    # HTTP 구독 엔드포인트가 받아들이는 SNS 토픽 (Lambda 는 트리거 설정으로 제한됨)
    allowed_topic_arns: Tuple[str, ...] = ()


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() not in ("0", "false", "no", "off")


def _parse_list(raw: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _validate_webhook_url(url: str) -> None:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        raise ConfigError(f"SLACK_WEBHOOK is not a valid URL: {url!r}") from None
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigError(f"SLACK_WEBHOOK must be an http(s) URL: {url!r}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> NotifierSettings:
    """
    환경변수에서 설정을 한 번 읽어 NotifierSettings 로 만든다.

    호출마다 os.environ 을 흩어서 읽지 않도록, invocation 시작 시 한 번만 호출하고
    결과를 그대로 notifier 에 넘긴다.

    Args:
        environ: 테스트용 환경변수 매핑 (None 이면 os.environ)

    Raises:
        ConfigError: SLACK_WEBHOOK 누락 또는 URL / 타임아웃 값이 잘못된 경우
    """
    env = os.environ if environ is None else environ

    webhook_url = env.get("SLACK_WEBHOOK", "").strip()
    if not webhook_url:
        raise ConfigError("SLACK_WEBHOOK is not set")
    _validate_webhook_url(webhook_url)

    raw_timeout = env.get("SLACK_WEBHOOK_TIMEOUT", "")
    timeout = DEFAULT_TIMEOUT_SECONDS
    if raw_timeout.strip():
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"SLACK_WEBHOOK_TIMEOUT is not a number: {raw_timeout!r}") from None
        if timeout <= 0:
            raise ConfigError(f"SLACK_WEBHOOK_TIMEOUT must be positive: {raw_timeout!r}")

    return NotifierSettings(
        webhook_url=webhook_url,
        timeout=timeout,
        verify_ssl=_parse_bool(env.get("SLACK_VERIFY_SSL", "true")),
        log_level=env.get("LOG_LEVEL", "INFO").upper() or "INFO",
        allowed_topic_arns=_parse_list(env.get("SNS_TOPIC_ARNS", "")),
    )

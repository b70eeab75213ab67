# alarm_notifier/adapters/slack_notifier.py
"""
Slack Incoming Webhook 전송 어댑터
"""
from typing import Optional
import logging

import httpx

from alarm_notifier.adapters.slack_message import SlackMessage
from alarm_notifier.config import DEFAULT_TIMEOUT_SECONDS, NotifierSettings
from alarm_notifier.errors import DeliveryError, DeliveryRejected

logger = logging.getLogger(__name__)

SLACK_SUCCESS_STATUS = 200


class SlackNotifier:
    """Slack Webhook 으로 attachment 메시지 전송"""

    def __init__(
        self,
        webhook_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            webhook_url: Slack Incoming Webhook URL
            timeout: 요청 타임아웃 (초)
            verify_ssl: TLS 인증서 검증 여부
            transport: 테스트용 httpx transport (MockTransport 등)
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: NotifierSettings) -> "SlackNotifier":
        return cls(
            webhook_url=settings.webhook_url,
            timeout=settings.timeout,
            verify_ssl=settings.verify_ssl,
        )

    async def send(self, message: SlackMessage) -> int:
        """
        메시지를 한 번 POST 한다. 재시도하지 않는다.

        Args:
            message: 전송할 SlackMessage

        Returns:
            응답 상태코드 (항상 200)

        Raises:
            DeliveryRejected: 200 이외의 응답
            DeliveryError: connect / timeout / DNS 등 네트워크 실패, 잘못된 webhook URL
        """
        async with httpx.AsyncClient(
            timeout=self.timeout,
            verify=self.verify_ssl,
            transport=self._transport,
        ) as client:
            try:
                resp = await client.post(self.webhook_url, json=message.to_payload())
            except httpx.RequestError as exc:
                logger.error(f"❌ Slack webhook request error: {exc!r}")
                raise DeliveryError(f"Slack webhook request failed: {exc}") from exc
            except httpx.InvalidURL as exc:
                logger.error(f"❌ Slack webhook URL is invalid: {exc!r}")
                raise DeliveryError(f"Slack webhook URL is invalid: {exc}") from exc

        if resp.status_code != SLACK_SUCCESS_STATUS:
            logger.error(
                f"❌ Slack webhook response error. "
                f"status={resp.status_code} body={resp.text[:200]}"
            )
            raise DeliveryRejected(resp.status_code, resp.text)

        logger.info("✅ Message successfully posted to Slack.")
        return resp.status_code

# alarm_notifier/main.py
"""
SNS HTTP(S) 구독용 서버

Lambda 대신 SNS 토픽을 HTTP 엔드포인트로 구독할 때 사용한다.
    uvicorn alarm_notifier.main:app
"""
from contextlib import asynccontextmanager
from dataclasses import asdict
import json
import logging
import re

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from alarm_notifier.config import load_settings
from alarm_notifier.container import get_container, init_container, is_container_initialized
from alarm_notifier.errors import ConfigError, DecodeError, DeliveryError
from alarm_notifier.logging_config import setup_logging

logger = logging.getLogger(__name__)

SNS_MESSAGE_TYPE_HEADER = "x-amz-sns-message-type"
# ex) sns.us-east-1.amazonaws.com, sns.cn-north-1.amazonaws.com.cn
SNS_HOST_PATTERN = re.compile(r"^sns\.[a-z0-9-]+\.amazonaws\.com(\.cn)?$")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행"""
    # Startup
    settings = load_settings()
    setup_logging(settings.log_level)
    if not settings.allowed_topic_arns:
        raise ConfigError("SNS_TOPIC_ARNS is not set")

    logger.info("=" * 80)
    logger.info("🚀 Starting CloudWatch Alarm Notifier")
    logger.info("=" * 80)

    init_container(settings)

    yield

    logger.info("👋 Shutting down CloudWatch Alarm Notifier")


app = FastAPI(
    title="CloudWatch Alarm Notifier",
    lifespan=lifespan
)


def _is_trusted_subscribe_url(url: str) -> bool:
    """SNS 가 보낸 SubscribeURL 인지 확인 (https + sns.<region>.amazonaws.com)"""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return parsed.scheme == "https" and SNS_HOST_PATTERN.match(parsed.host) is not None


async def confirm_subscription(subscribe_url: str, timeout: float) -> None:
    if not _is_trusted_subscribe_url(subscribe_url):
        raise HTTPException(status_code=400, detail="Untrusted SubscribeURL")

    async with httpx.AsyncClient(timeout=timeout) as client:
        try:
            resp = await client.get(subscribe_url)
        except httpx.RequestError as exc:
            logger.error(f"❌ SNS subscription confirm request error: {exc!r}")
            raise HTTPException(status_code=502, detail="Subscription confirmation failed") from exc

    if resp.is_error:
        logger.error(f"❌ SNS subscription confirm failed. status={resp.status_code}")
        raise HTTPException(status_code=502, detail="Subscription confirmation failed")

    logger.info("✅ SNS subscription confirmed")


@app.post("/sns")
async def sns_endpoint(request: Request):
    """
    SNS HTTP 구독 엔드포인트

    SNS 는 Content-Type 을 text/plain 으로 보내기 때문에 body 를 직접 JSON 파싱한다.
    """
    raw = await request.body()
    try:
        body = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail="Body is not valid JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Body must be a JSON object")

    message_type = request.headers.get(SNS_MESSAGE_TYPE_HEADER) or body.get("Type", "")
    container = get_container()

    topic_arn = body.get("TopicArn", "")
    if message_type in ("SubscriptionConfirmation", "Notification") and \
            topic_arn not in container.settings.allowed_topic_arns:
        logger.warning(f"🚫 Rejected SNS message from unknown topic: {topic_arn!r}")
        raise HTTPException(status_code=403, detail="Unknown TopicArn")

    if message_type == "SubscriptionConfirmation":
        await confirm_subscription(body.get("SubscribeURL", ""), container.settings.timeout)
        return {"status": "confirmed"}

    if message_type != "Notification":
        logger.info(f"⏭️ Ignoring SNS message type: {message_type!r}")
        return {"status": "ignored", "type": message_type}

    # Lambda 와 같은 envelope 형태로 감싸서 동일한 handler 를 탄다
    event = {"Records": [{"Sns": body}]}
    try:
        result = await container.alarm_handler.handle_event(event)
    except DecodeError as exc:
        logger.warning(f"⚠️ Invalid SNS notification: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))
    except DeliveryError as exc:
        raise HTTPException(status_code=502, detail=str(exc))

    if not result.delivered:
        return JSONResponse(status_code=502, content=asdict(result))
    return asdict(result)


@app.get("/health")
async def health():
    """헬스체크 엔드포인트"""
    return {
        "status": "ok",
        "container_initialized": is_container_initialized(),
    }

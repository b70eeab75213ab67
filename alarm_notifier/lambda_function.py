# alarm_notifier/lambda_function.py
"""
SNS -> Lambda 진입점

CloudWatch Alarm 이 SNS 토픽으로 발행되면 이 핸들러가 호출되어 Slack 으로 전달한다.
Handler 설정: alarm_notifier.lambda_function.lambda_handler
"""
from typing import Any, Dict, Optional
import asyncio
import json
import logging

from alarm_notifier.application.ports.notifier import Notifier
from alarm_notifier.application.services.handler import NotificationResult
from alarm_notifier.config import NotifierSettings, load_settings
from alarm_notifier.container import ServiceContainer
from alarm_notifier.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def process_event(
    event: Dict[str, Any],
    settings: NotifierSettings,
    notifier: Optional[Notifier] = None,
) -> NotificationResult:
    """invocation 마다 새 컨테이너로 이벤트 하나를 처리"""
    container = ServiceContainer(settings, notifier)
    return await container.alarm_handler.handle_event(event)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda 핸들러

    - 설정 누락(ConfigError), 디코딩 실패(DecodeError), 네트워크 실패(DeliveryError)는
      그대로 raise 해서 invocation 을 실패시킨다. 재시도는 SNS/Lambda 쪽 정책을 따른다.
    - Slack 이 200 이외로 응답하면 invocation 은 성공 처리하되 statusCode 로 남긴다.
    """
    settings = load_settings()
    setup_logging(settings.log_level)

    result = asyncio.run(process_event(event, settings))

    if not result.delivered:
        return {
            "statusCode": result.status_code,
            "body": json.dumps(f"Slack rejected notification for {result.alarm_name}"),
        }

    return {
        "statusCode": result.status_code,
        "body": json.dumps("Notification has been sent"),
    }

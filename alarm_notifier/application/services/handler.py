# alarm_notifier/application/services/handler.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

from alarm_notifier.application.ports.notifier import Notifier
from alarm_notifier.errors import DeliveryRejected
from .decoder import decode_event
from .formatter import build_slack_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationResult:
    alarm_name: str
    delivered: bool
    status_code: Optional[int] = None


class AlarmNotificationHandler:
    """
    CloudWatch 알람 SNS 이벤트 처리 서비스

    책임:
    - SNS envelope / 알람 payload 디코딩
    - Slack 메시지 생성
    - Slack 전송 및 결과 보고
    """

    def __init__(self, notifier: Notifier):
        """
        Args:
            notifier: 알림 전송 구현체
        """
        self.notifier = notifier

    async def handle_event(self, event: Dict[str, Any]) -> NotificationResult:
        """
        SNS 이벤트 하나를 받아서

          1) 알람 payload 디코딩 (실패 시 DecodeError, 전송하지 않음)
          2) Slack 메시지 생성
          3) Slack 으로 한 번 전송

        까지 수행한다.

        Args:
            event: SNS -> Lambda 이벤트

        Returns:
            NotificationResult (Slack 이 거부하면 delivered=False)

        Raises:
            DecodeError: 이벤트를 해석할 수 없음
            DeliveryError: 네트워크 레벨 전송 실패
        """
        alarm = decode_event(event)
        logger.info(f"New alarm: {alarm.alarm_name} - Reason: {alarm.reason}")

        message = build_slack_message(alarm)

        try:
            status_code = await self.notifier.send(message)
        except DeliveryRejected as exc:
            logger.error(
                f"❌ Slack rejected notification for {alarm.alarm_name} "
                f"(status={exc.status_code})"
            )
            return NotificationResult(
                alarm_name=alarm.alarm_name,
                delivered=False,
                status_code=exc.status_code,
            )

        logger.info("Notification has been sent")
        return NotificationResult(
            alarm_name=alarm.alarm_name,
            delivered=True,
            status_code=status_code,
        )

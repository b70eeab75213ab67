"""
알림 전송 포트 (인터페이스)

Secondary Port: 애플리케이션이 외부 채팅 시스템을 사용하기 위한 인터페이스
required Port
"""
from typing import Protocol

from alarm_notifier.adapters.slack_message import SlackMessage


class Notifier(Protocol):
    """
    알림 전송 인터페이스

    이 Protocol을 구현하는 어댑터:
    - SlackNotifier (adapters/slack_notifier.py)

    Protocol을 사용하는 서비스:
    - handler.py (SNS 알람 이벤트 처리)
    """

    async def send(self, message: SlackMessage) -> int:
        """
        메시지 전송

        Args:
            message: 전송할 SlackMessage

        Returns:
            응답 상태코드

        Raises:
            DeliveryRejected: 엔드포인트가 200 이외로 응답
            DeliveryError: 네트워크 레벨 실패
        """
        ...

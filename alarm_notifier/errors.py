"""
알람 알림 처리 중 발생하는 예외 정의
"""
from __future__ import annotations


class NotifierError(Exception):
    """모든 알림 처리 예외의 베이스"""


class DecodeError(NotifierError):
    """인바운드 이벤트를 AlarmEvent로 해석할 수 없음"""


class EnvelopeDecodeError(DecodeError):
    """SNS envelope 단계 실패 (Records 없음, Message 없음 등)"""


class AlarmPayloadDecodeError(DecodeError):
    """Message 문자열 안의 알람 JSON 파싱 실패"""


class ConfigError(NotifierError):
    """필수 설정값 누락 또는 잘못된 값"""


class DeliveryError(NotifierError):
    """Webhook 엔드포인트에 도달하지 못함 (connect / timeout / DNS)"""


class DeliveryRejected(NotifierError):
    """Webhook 이 200 이외의 상태코드로 응답함"""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Webhook rejected message: status={status_code} body={body[:200]}")

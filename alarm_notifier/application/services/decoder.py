from __future__ import annotations

from typing import Any, Dict
import logging

from pydantic import ValidationError

from alarm_notifier.adapters.sns_envelope import SNSEnvelope
from alarm_notifier.domain.alarm import AlarmEvent
from alarm_notifier.errors import AlarmPayloadDecodeError, EnvelopeDecodeError

logger = logging.getLogger(__name__)


def extract_sns_message(event: Dict[str, Any]) -> str:
    """
    1단계: SNS envelope 에서 첫 번째 레코드의 Message 문자열을 꺼낸다.

    Raises:
        EnvelopeDecodeError: 레코드가 없거나 Message 가 문자열이 아닌 경우
    """
    try:
        envelope = SNSEnvelope.model_validate(event)
    except ValidationError as exc:
        raise EnvelopeDecodeError(f"Invalid SNS envelope: {exc}") from exc

    message = envelope.first_message()
    if message is None:
        raise EnvelopeDecodeError("SNS envelope has no records")

    if len(envelope.Records) > 1:
        logger.warning(f"⚠️ SNS envelope has {len(envelope.Records)} records, only the first is used")

    return message


def parse_alarm(message: str) -> AlarmEvent:
    """
    2단계: Message 문자열(JSON)을 AlarmEvent 로 파싱한다.

    Raises:
        AlarmPayloadDecodeError: JSON 이 아니거나 객체가 아니거나 AlarmName 이 없는 경우
    """
    try:
        return AlarmEvent.model_validate_json(message)
    except ValidationError as exc:
        raise AlarmPayloadDecodeError(f"Invalid CloudWatch alarm payload: {exc}") from exc


def decode_event(event: Dict[str, Any]) -> AlarmEvent:
    """SNS 이벤트 -> AlarmEvent (1단계 + 2단계)"""
    return parse_alarm(extract_sns_message(event))

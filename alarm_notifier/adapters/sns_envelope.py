# alarm_notifier/adapters/sns_envelope.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class SNSNotification(BaseModel):
    """
    Records[].Sns 하나.
    Message 는 알람 JSON 이 문자열로 한 번 더 인코딩되어 들어있다.
    """

    Message: str


class SNSRecord(BaseModel):
    Sns: SNSNotification


class SNSEnvelope(BaseModel):
    """
    SNS -> Lambda 이벤트 envelope.

    - 우리가 쓰는 건 Records[0].Sns.Message 뿐이라 나머지는 생략.
    - EventSource, MessageAttributes 같은 필드는 Pydantic 이 무시한다.
    """

    Records: List[SNSRecord] = Field(default_factory=list)

    def first_message(self) -> str | None:
        """첫 번째 레코드의 Message 반환, 레코드가 없으면 None"""
        if not self.Records:
            return None
        return self.Records[0].Sns.Message

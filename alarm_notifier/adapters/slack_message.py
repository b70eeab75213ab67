# alarm_notifier/adapters/slack_message.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SlackField(BaseModel):
    """
    Slack attachment 의 fields[] 한 줄.
    ex) { "title": "Region", "value": "us-east-1", "short": true }
    """

    title: str
    value: str
    short: bool = True


class Attachment(BaseModel):
    """
    Slack legacy attachment 하나.
    본문(reason)은 Slack 이 렌더링하는 text 키로 보낸다.
    """

    pretext: str = ""
    title: str = ""
    title_link: str = ""
    text: str = ""
    color: str = ""
    author_name: Optional[str] = None
    fields: List[SlackField] = Field(default_factory=list)


class SlackMessage(BaseModel):
    """
    Slack Incoming Webhook JSON payload.

    - attachments[] 는 알람 한 건당 하나만 만든다.
    - text 는 비어 있으면 전송 payload 에서 빠진다.
    """

    text: Optional[str] = None
    attachments: List[Attachment] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Webhook 으로 보낼 dict (None 값 제외)"""
        return self.model_dump(exclude_none=True)

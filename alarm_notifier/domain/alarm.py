from __future__ import annotations

from typing import Any, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class Dimension(BaseModel):
    """
    알람 트리거 조건의 metric dimension 한 쌍.
    SNS 페이로드는 {"name", "value"}, DescribeAlarms API 는 {"Name", "Value"} 라서 둘 다 받는다.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str = Field(default="", validation_alias=AliasChoices("name", "Name"))
    value: str = Field(default="", validation_alias=AliasChoices("value", "Value"))

    @field_validator("name", "value", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class AlarmEvent(BaseModel):
    """
    SNS Message 안에 문자열로 들어있는 CloudWatch 알람 상태 변경 문서.

    - AlarmName 만 필수, 나머지는 없거나 null 이면 빈 문자열로 채운다.
    - AWSAccountId, StateChangeTime 등 쓰지 않는 필드는 Pydantic 이 무시한다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    alarm_name: str = Field(alias="AlarmName", min_length=1)
    alarm_description: str = Field(default="", alias="AlarmDescription")
    new_state: str = Field(default="", alias="NewStateValue")
    old_state: str = Field(default="", alias="OldStateValue")
    reason: str = Field(default="", alias="NewStateReason")
    region: str = Field(default="", alias="Region")
    alarm_arn: str = Field(default="", alias="AlarmArn")
    dimensions: List[Dimension] = Field(default_factory=list, alias="Dimensions")

    @model_validator(mode="before")
    @classmethod
    def _lift_trigger_dimensions(cls, data: Any) -> Any:
        # 실제 CloudWatch 알림은 Trigger.Dimensions 에 들어있다
        if isinstance(data, dict) and data.get("Dimensions") is None:
            trigger = data.get("Trigger")
            if isinstance(trigger, dict) and trigger.get("Dimensions") is not None:
                return {**data, "Dimensions": trigger["Dimensions"]}
        return data

    @field_validator(
        "alarm_description", "new_state", "old_state", "reason", "region", "alarm_arn",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("dimensions", mode="before")
    @classmethod
    def _none_as_no_dimensions(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def region_code(self) -> str:
        """
        AlarmArn 에서 리전 코드를 꺼낸다.
        Region 필드는 "US East (N. Virginia)" 같은 표시용 이름이라 콘솔 링크에 쓸 수 없다.
        ex) arn:aws:cloudwatch:us-east-1:123456789012:alarm:high-cpu -> "us-east-1"
        """
        parts = self.alarm_arn.split(":")
        if len(parts) < 4 or parts[0] != "arn":
            return ""
        return parts[3]

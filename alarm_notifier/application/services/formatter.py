from __future__ import annotations

from urllib.parse import quote

from alarm_notifier.adapters.slack_message import Attachment, SlackField, SlackMessage
from alarm_notifier.domain.alarm import AlarmEvent
from alarm_notifier.domain.severity import severity_color

CONSOLE_URL = "https://console.aws.amazon.com/cloudwatch/home"


def console_link(alarm: AlarmEvent) -> str:
    """
    CloudWatch 콘솔에서 해당 알람을 여는 링크.

    알람 이름은 하나의 path segment 로 escape 한다 ("/", ":", 공백 모두 escape,
    공백은 "+" 가 아니라 "%20").
    리전은 AlarmArn 에서 꺼내고, ARN 이 없으면 region 쿼리를 붙이지 않는다.
    """
    base = CONSOLE_URL
    region_code = alarm.region_code
    if region_code:
        base = f"{base}?region={quote(region_code, safe='')}"
    return f"{base}#s={quote(alarm.alarm_name, safe='')}"


def build_title(alarm: AlarmEvent) -> str:
    """ex) "ALARM: high-cpu-prod" """
    return f"{alarm.new_state}: {alarm.alarm_name}"


def build_fields(alarm: AlarmEvent) -> list[SlackField]:
    # 순서 고정: Region, Previous State, dimensions (입력 순서)
    fields = [
        SlackField(title="Region", value=alarm.region, short=True),
        SlackField(title="Previous State", value=alarm.old_state, short=True),
    ]
    fields.extend(
        SlackField(title=dimension.name, value=dimension.value, short=True)
        for dimension in alarm.dimensions
    )
    return fields


def build_slack_message(alarm: AlarmEvent) -> SlackMessage:
    """
    AlarmEvent -> SlackMessage.

    부수효과 없는 순수 함수. 같은 입력이면 항상 같은 메시지가 나온다.
    """
    pretext = f"`{alarm.alarm_description}`" if alarm.alarm_description else ""

    attachment = Attachment(
        pretext=pretext,
        title=build_title(alarm),
        title_link=console_link(alarm),
        text=alarm.reason,
        color=severity_color(alarm.new_state),
        fields=build_fields(alarm),
    )
    return SlackMessage(attachments=[attachment])

from types import MappingProxyType
from typing import Mapping


ALARM = "ALARM"
OK = "OK"
INSUFFICIENT_DATA = "INSUFFICIENT_DATA"

# 모르는 상태값은 실패시키지 않고 기본 색상(빈 문자열)으로 보낸다
DEFAULT_COLOR = ""

# 알람 상태 -> Slack attachment color (읽기 전용)
SEVERITY_COLORS: Mapping[str, str] = MappingProxyType({
    ALARM: "danger",
    INSUFFICIENT_DATA: "warning",
    OK: "good",
})


def severity_color(state: str) -> str:
    """상태값에 해당하는 attachment color 반환"""
    return SEVERITY_COLORS.get(state, DEFAULT_COLOR)

# alarm_notifier/container.py
"""
의존성 조립 (Dependency Assembly)
"""
from typing import Optional
import logging

from alarm_notifier.adapters.slack_notifier import SlackNotifier
from alarm_notifier.application.ports.notifier import Notifier
from alarm_notifier.application.services.handler import AlarmNotificationHandler
from alarm_notifier.config import NotifierSettings, load_settings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    서비스 컨테이너

    설정값으로 Notifier 와 Handler 를 생성하고 조립합니다.
    """

    def __init__(self, settings: NotifierSettings, notifier: Optional[Notifier] = None):
        self._settings = settings

        # Adapter 생성 (테스트에서는 주입)
        self._notifier = notifier or SlackNotifier.from_settings(settings)

        # Services 생성
        self._alarm_handler = AlarmNotificationHandler(self._notifier)

    @property
    def settings(self) -> NotifierSettings:
        return self._settings

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def alarm_handler(self) -> AlarmNotificationHandler:
        """AlarmNotificationHandler 인스턴스"""
        return self._alarm_handler


# 전역 컨테이너 인스턴스
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """
    ServiceContainer 싱글톤 인스턴스 반환

    아직 없으면 환경변수에서 설정을 읽어 생성합니다.

    Raises:
        ConfigError: SLACK_WEBHOOK 누락 등
    """
    global _container
    if _container is None:
        _container = ServiceContainer(load_settings())
    return _container


def init_container(
    settings: NotifierSettings, notifier: Optional[Notifier] = None
) -> ServiceContainer:
    """
    ServiceContainer 초기화

    서버 시작 시 명시적으로 호출합니다.
    """
    global _container
    _container = ServiceContainer(settings, notifier)
    logger.info("✅ Service container initialized")
    return _container


def reset_container() -> None:
    """컨테이너 제거 (테스트용)"""
    global _container
    _container = None


def is_container_initialized() -> bool:
    return _container is not None

"""
로깅 설정
"""
import logging
import sys


def setup_logging(level: str = "INFO"):
    """
    애플리케이션 로깅 설정

    - Console handler 사용
    - stdout 출력 (Lambda 에서는 CloudWatch Logs 로 수집됨)
    - 포맷: '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 기존 핸들러 제거 (Lambda 런타임 기본 핸들러 포함, 중복 방지)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

# app/core/logging_config.py

"""
애플리케이션 로깅 설정 모듈입니다.

`setup_logging`은 루트 로거에 콘솔 핸들러를 한 번만 붙입니다.
각 모듈은 `logging.getLogger(__name__)`으로 로거를 얻어 사용합니다.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거를 설정합니다.
    이미 핸들러가 있으면 (테스트, uvicorn 재시작 등) 레벨만 맞추고 종료합니다.
    """
    root_logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(numeric_level)

    if root_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

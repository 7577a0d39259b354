import logging
import sys

import structlog

from beerstock.core.config import settings


# 환경별 기본 로그 레벨 (LOG_LEVEL 지정 시 우선)
def get_log_level() -> str:
    level_map = {
        "production": "INFO",
        "staging": "INFO",
        "development": "DEBUG",
        "test": "WARNING",
    }

    return settings.LOG_LEVEL or level_map.get(settings.ENVIRONMENT.lower(), "INFO")


# 표준 logging 설정 (콘솔 출력)
def setup_stdlib_logging() -> None:
    log_level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# structlog 설정 (운영: JSON, 개발: 콘솔)
def setup_structlog() -> None:
    env = settings.ENVIRONMENT.lower()

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
    ]

    if env in ["production", "staging"]:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# 전체 로그 설정 (앱 시작 시 1회)
def configure_logging() -> None:
    setup_stdlib_logging()
    setup_structlog()


# 모듈별 로거
def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)

"""전역 로깅 설정

서비스 코드는 구조화된 필드를 ``extra`` 로 전달합니다::

    logger.info("User deleted", extra={"user_id": 1, "action": "deleted"})

개발 환경에서는 ``| user_id=1 action=deleted`` 형태로 메시지 뒤에,
그 외 환경에서는 JSON 한 줄의 최상위 키로 출력됩니다.
"""

import json
import logging
import sys
from typing import Any

from app.core.config import settings

# LogRecord 기본 속성 (extra 필드 판별용)
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def get_extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """LogRecord 에서 extra 로 전달된 필드만 추출"""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포맷터 (개발 환경용)"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        color = self.COLORS.get(levelname, self.RESET)
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            output = super().format(record)
        finally:
            # 같은 레코드를 받는 다른 핸들러에는 원래 레벨 이름 유지
            record.levelname = levelname

        extra = get_extra_fields(record)
        if extra:
            fields = " ".join(f"{key}={value}" for key, value in extra.items())
            output = f"{output} | {fields}"
        return output


class JSONFormatter(logging.Formatter):
    """JSON 한 줄 포맷터 (로그 수집 시스템용)"""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(get_extra_fields(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging() -> None:
    """애플리케이션 로깅 설정"""

    log_level = logging.DEBUG if settings.debug else logging.INFO

    formatter: logging.Formatter
    if settings.is_development:
        formatter = ColoredFormatter(
            fmt=(
                "%(asctime)s | %(levelname)-8s | "
                "%(name)s:%(lineno)d | %(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S%z")

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 외부 라이브러리 로그 레벨 조정
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """로거 인스턴스 반환

    Example::

        from app.core.logging import get_logger
        logger = get_logger(__name__)
        logger.debug("Query built", extra={"model": "user"})
    """
    return logging.getLogger(name)

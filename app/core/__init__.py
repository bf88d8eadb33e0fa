"""Core 모듈"""

from app.core.config import settings
from app.core.database import Base, check_database_health, get_db
from app.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ErrorCode,
    NotFoundException,
)
from app.core.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "Base",
    "get_db",
    "check_database_health",
    "ErrorCode",
    "BaseAPIException",
    "BadRequestException",
    "NotFoundException",
    "get_logger",
    "setup_logging",
]

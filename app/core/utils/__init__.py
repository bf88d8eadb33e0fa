"""유틸리티 모듈"""

from app.core.utils.datetime import UTC, now_utc, parse_iso, parse_iso_date
from app.core.utils.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    compute_meta,
    normalize,
)

__all__ = [
    # datetime
    "UTC",
    "now_utc",
    "parse_iso",
    "parse_iso_date",
    # pagination
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "normalize",
    "compute_meta",
]

"""페이지네이션 유틸리티

요청에서 받은 page/limit 값을 정규화하고, 전체 개수로부터
페이지 메타 정보를 계산합니다.

Example::

    from app.core.utils.pagination import compute_meta, normalize

    page, limit = normalize(dto.get("page"), dto.get("limit"))
    meta = compute_meta(page, limit, total=42)
"""

import math
from typing import Any, Optional

from app.core.schemas import PageMeta

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _to_int(value: Any) -> Optional[int]:
    """정수로 해석 가능한 값만 변환 (bool 제외)"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def normalize(page_in: Any = None, limit_in: Any = None) -> tuple[int, int]:
    """page/limit 정규화

    - page: 1 이상이면 그대로, 아니면 1
    - limit: 1 이상이면 최대 100으로 제한, 없거나 1 미만이면 10

    Args:
        page_in: 요청 page 값
        limit_in: 요청 limit 값

    Returns:
        (page, limit) 튜플
    """
    page = _to_int(page_in)
    if page is None or page < 1:
        page = DEFAULT_PAGE

    limit = _to_int(limit_in)
    if limit is None or limit < 1:
        limit = DEFAULT_LIMIT

    return page, min(limit, MAX_LIMIT)


def compute_meta(page: int, limit: int, total: int) -> PageMeta:
    """전체 개수로부터 페이지 메타 정보 계산

    Args:
        page: 현재 페이지
        limit: 페이지 크기
        total: 전체 아이템 수

    Returns:
        PageMeta 인스턴스
    """
    return PageMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
        has_next_page=page * limit < total,
        has_previous_page=page > 1,
    )

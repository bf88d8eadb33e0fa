"""공통 스키마

이 모듈은 페이지네이션 결과의 일관된 구조를 정의합니다.

Usage::

    from app.core.schemas import PaginatedResult
    from app.core.utils.pagination import compute_meta

    return PaginatedResult(items=rows, meta=compute_meta(page, limit, total))

Note:
    ``meta`` 는 항상 (page, limit, total) 만으로 계산됩니다.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """기본 스키마 (ORM 모델 변환용)"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class PageMeta(BaseModel):
    """페이지네이션 메타 정보"""

    page: int = Field(..., description="현재 페이지")
    limit: int = Field(..., description="페이지 크기")
    total: int = Field(..., description="전체 아이템 수")
    total_pages: int = Field(..., description="전체 페이지 수")
    has_next_page: bool = Field(..., description="다음 페이지 존재 여부")
    has_previous_page: bool = Field(..., description="이전 페이지 존재 여부")


class PaginatedResult(BaseModel, Generic[DataT]):
    """페이지네이션 결과

    Example::

        result = await query_builder.find_many_with_pagination(options)
        for user in result.items:
            ...
        if result.meta.has_next_page:
            ...
    """

    items: list[DataT] = Field(default_factory=list)
    meta: PageMeta

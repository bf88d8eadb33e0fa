"""쿼리 빌더 타입 정의

- 필터 프레디킷: ContainsFilter, EndsWithFilter, InFilter, GteFilter
  (정확 일치는 값 자체를 그대로 사용)
- QuerySpec: 리포지토리에 전달되는 정규화된 조회 명세
- QueryBuilderOptions: find_many_with_pagination 입력
"""

from datetime import datetime
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

SortOrder = Literal["asc", "desc"]

# 페이지네이션/정렬/검색 제어 키
RESERVED_KEYS = frozenset({"page", "limit", "search", "sortBy", "sortOrder"})

# 옵션 라우팅 키 (필터로 쓰일 수 없음)
ROUTING_KEYS = frozenset({"searchFields", "relations", "model"})


class _Predicate(BaseModel):
    model_config = ConfigDict(frozen=True)


class ContainsFilter(_Predicate):
    """부분 일치 (기본: 대소문자 무시)"""

    contains: str
    case_sensitive: bool = False


class EndsWithFilter(_Predicate):
    """접미사 일치"""

    ends_with: str


class InFilter(_Predicate):
    """목록 포함"""

    values: list[Any]


class GteFilter(_Predicate):
    """이후 날짜 (이상)"""

    gte: datetime


FilterPredicate = Union[ContainsFilter, EndsWithFilter, InFilter, GteFilter, Any]


class DefaultSort(BaseModel):
    """요청에 정렬이 없을 때 사용할 기본 정렬"""

    model_config = ConfigDict(frozen=True)

    field: str
    order: SortOrder = "desc"


class ControlFields(BaseModel):
    """요청에서 분리된 제어 필드"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: Any = None
    limit: Any = None
    search: Any = None
    sort_by: Any = Field(default=None, alias="sortBy")
    sort_order: Any = Field(default=None, alias="sortOrder")


class QuerySpec(BaseModel):
    """리포지토리에 전달되는 조회 명세 (불변)"""

    model_config = ConfigDict(frozen=True)

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1, le=100)
    search: Optional[str] = None
    search_fields: Optional[list[str]] = None
    sort_by: Optional[str] = None
    sort_order: SortOrder = "desc"
    relations: list[str] = Field(default_factory=list)
    custom_filters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("custom_filters")
    @classmethod
    def reject_reserved_keys(cls, v: dict[str, Any]) -> dict[str, Any]:
        reserved = sorted((RESERVED_KEYS | ROUTING_KEYS) & v.keys())
        if reserved:
            raise ValueError(
                f"custom_filters must not contain reserved keys: {reserved}"
            )
        return v


class QueryBuilderOptions(BaseModel):
    """find_many_with_pagination 옵션

    dto 에는 원본 요청 매핑 또는 Pydantic 모델을 전달합니다.
    모델인 경우 alias 기준으로, 명시적으로 설정된 필드만 사용합니다.
    """

    model: str
    dto: Any
    search_fields: Optional[list[str]] = None
    relations: Optional[list[str]] = None
    custom_filters: Optional[dict[str, Any]] = None
    default_sort: Optional[DefaultSort] = None

    def raw_dto(self) -> dict[str, Any]:
        """dto 를 키/값 매핑으로 변환"""
        if isinstance(self.dto, BaseModel):
            return self.dto.model_dump(by_alias=True, exclude_unset=True)
        return dict(self.dto)

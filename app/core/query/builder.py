"""쿼리 빌더 서비스

요청 매핑을 QuerySpec 으로 변환하고 리포지토리에 위임합니다.
상태를 갖지 않으므로 여러 요청에서 동시에 사용해도 안전합니다.
"""

from typing import Any, Optional

from app.core.logging import get_logger
from app.core.query.exceptions import (
    InvalidFilterFieldException,
    InvalidSortOrderException,
)
from app.core.query.filters import build_filters, partition
from app.core.query.repository import QueryRepository
from app.core.query.types import (
    RESERVED_KEYS,
    ROUTING_KEYS,
    QueryBuilderOptions,
    QuerySpec,
    SortOrder,
)
from app.core.schemas import PaginatedResult
from app.core.utils.pagination import normalize

logger = get_logger(__name__)

DEFAULT_SORT_ORDER: SortOrder = "desc"


def _resolve_sort_order(value: Any, fallback: SortOrder) -> SortOrder:
    if value is None or value == "":
        return fallback
    order = str(value).strip().lower()
    if order == "asc":
        return "asc"
    if order == "desc":
        return "desc"
    raise InvalidSortOrderException(value)


class QueryBuilderService:
    """페이지네이션/필터 쿼리 빌더"""

    def __init__(self, repository: QueryRepository):
        self.repository = repository

    def build_query_spec(self, options: QueryBuilderOptions) -> QuerySpec:
        """요청 옵션으로부터 QuerySpec 생성

        Args:
            options: 모델, 원본 요청, 검색 필드, 관계, 명시 필터, 기본 정렬

        Returns:
            정규화된 QuerySpec

        Raises:
            InvalidFilterValueException: 필터 값을 해석할 수 없는 경우
            InvalidFilterFieldException: 필터 대상이 제어/라우팅 키인 경우
            InvalidSortOrderException: 정렬 방향이 잘못된 경우
        """
        control, candidates = partition(options.raw_dto())

        # 명시 필터가 추론 필터보다 우선
        filters = build_filters(candidates)
        filters.update(options.custom_filters or {})

        # 제어/라우팅 키는 필터 대상 필드가 될 수 없음
        conflicts = sorted((RESERVED_KEYS | ROUTING_KEYS) & filters.keys())
        if conflicts:
            raise InvalidFilterFieldException(
                model=options.model, field=conflicts[0]
            )

        page, limit = normalize(control.page, control.limit)

        default_sort = options.default_sort
        sort_by = control.sort_by or (default_sort.field if default_sort else None)
        sort_order = _resolve_sort_order(
            control.sort_order,
            default_sort.order if default_sort else DEFAULT_SORT_ORDER,
        )

        return QuerySpec(
            page=page,
            limit=limit,
            search=None if control.search is None else str(control.search),
            search_fields=options.search_fields,
            sort_by=None if sort_by is None else str(sort_by),
            sort_order=sort_order,
            relations=options.relations or [],
            custom_filters=filters,
        )

    async def find_many_with_pagination(
        self, options: QueryBuilderOptions
    ) -> PaginatedResult:
        """조건에 맞는 목록을 페이지 단위로 조회

        리포지토리 결과를 가공하지 않고 그대로 반환합니다.
        리포지토리 예외는 그대로 전파됩니다.
        """
        spec = self.build_query_spec(options)

        logger.debug(
            "Query built",
            extra={
                "model": options.model,
                "page": spec.page,
                "limit": spec.limit,
                "sort_by": spec.sort_by,
                "sort_order": spec.sort_order,
                "filter_keys": sorted(spec.custom_filters),
            },
        )

        return await self.repository.find_many(options.model, spec)

    async def get_count(
        self, model: str, filters: Optional[dict[str, Any]] = None
    ) -> int:
        """개수 조회 (필터는 이미 프레디킷 형태여야 함)"""
        return await self.repository.count(model, filters)

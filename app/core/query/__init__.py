"""쿼리 빌더 모듈

요청 매핑을 페이지네이션/정렬/필터가 적용된 QuerySpec 으로 변환하고
리포지토리에 위임합니다.

구조:
    - types.py: 필터 프레디킷, QuerySpec, 옵션 타입
    - filters.py: 제어 필드 분리, 접미사 기반 필터 생성
    - builder.py: QueryBuilderService (목록/개수 조회)
    - repository.py: 리포지토리 계약과 SQLAlchemy 구현
    - exceptions.py: 쿼리 예외
"""

from app.core.query.builder import QueryBuilderService
from app.core.query.exceptions import (
    InvalidFilterFieldException,
    InvalidFilterValueException,
    InvalidSortOrderException,
    UnknownModelException,
)
from app.core.query.filters import build_filters, partition, synthesize
from app.core.query.repository import QueryRepository, SQLAlchemyQueryRepository
from app.core.query.types import (
    ContainsFilter,
    ControlFields,
    DefaultSort,
    EndsWithFilter,
    FilterPredicate,
    GteFilter,
    InFilter,
    QueryBuilderOptions,
    QuerySpec,
    SortOrder,
)

__all__ = [
    "QueryBuilderService",
    "QueryRepository",
    "SQLAlchemyQueryRepository",
    "QueryBuilderOptions",
    "QuerySpec",
    "DefaultSort",
    "ControlFields",
    "SortOrder",
    "FilterPredicate",
    "ContainsFilter",
    "EndsWithFilter",
    "InFilter",
    "GteFilter",
    "synthesize",
    "partition",
    "build_filters",
    "InvalidFilterValueException",
    "InvalidFilterFieldException",
    "InvalidSortOrderException",
    "UnknownModelException",
]

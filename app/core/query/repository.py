"""쿼리 리포지토리

- QueryRepository: 쿼리 빌더가 사용하는 리포지토리 계약
- SQLAlchemyQueryRepository: QuerySpec 을 SQLAlchemy 비동기 쿼리로 실행하는 구현
"""

import re
from typing import Any, Mapping, Optional, Protocol, Sequence

from sqlalchemy import Select, func, inspect, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapper, selectinload

from app.core.database import Base
from app.core.query.exceptions import (
    InvalidFilterFieldException,
    UnknownModelException,
)
from app.core.query.types import (
    ContainsFilter,
    EndsWithFilter,
    GteFilter,
    InFilter,
    QuerySpec,
)
from app.core.schemas import PaginatedResult
from app.core.utils.pagination import compute_meta

SOFT_DELETE_COLUMN = "deleted_at"

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """camelCase 필드 이름을 snake_case 로 변환 (firstName -> first_name)"""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class QueryRepository(Protocol):
    """쿼리 빌더가 사용하는 리포지토리 계약"""

    async def find_many(self, model: str, spec: QuerySpec) -> PaginatedResult:
        """검색/필터/정렬/페이지네이션을 적용한 목록과 메타 정보 반환"""
        ...

    async def count(
        self, model: str, filters: Optional[dict[str, Any]] = None
    ) -> int:
        """필터에 맞는 개수 반환 (filters 가 None 이면 전체)"""
        ...


def predicate_clause(column: Any, predicate: Any) -> Any:
    """필터 프레디킷을 SQLAlchemy 조건식으로 변환"""
    if isinstance(predicate, ContainsFilter):
        if predicate.case_sensitive:
            return column.contains(predicate.contains, autoescape=True)
        return column.icontains(predicate.contains, autoescape=True)
    if isinstance(predicate, EndsWithFilter):
        return column.endswith(predicate.ends_with, autoescape=True)
    if isinstance(predicate, InFilter):
        return column.in_(predicate.values)
    if isinstance(predicate, GteFilter):
        return column >= predicate.gte
    return column == predicate


class SQLAlchemyQueryRepository:
    """QuerySpec 을 SQLAlchemy 로 실행하는 리포지토리

    모델 이름("user")으로 매핑 클래스를 찾고, camelCase 필드 이름은
    snake_case 속성으로 해석합니다. deleted_at 컬럼이 있는 모델은
    Soft Delete 된 행을 제외합니다.

    Example::

        repository = SQLAlchemyQueryRepository(session, {"user": User})
        builder = QueryBuilderService(repository)
    """

    def __init__(self, session: AsyncSession, models: Mapping[str, type[Base]]):
        self.session = session
        self.models = dict(models)

    def _entity(self, model: str) -> type[Base]:
        entity = self.models.get(model)
        if entity is None:
            raise UnknownModelException(model)
        return entity

    def _column(self, model: str, entity: type[Base], field: str) -> Any:
        mapper: Mapper = inspect(entity)
        for name in (field, to_snake_case(field)):
            if name in mapper.column_attrs:
                return getattr(entity, name)
        raise InvalidFilterFieldException(model=model, field=field)

    def _relation_option(self, model: str, entity: type[Base], path: str) -> Any:
        option = None
        current = entity
        for part in path.split("."):
            mapper: Mapper = inspect(current)
            name = part if part in mapper.relationships else to_snake_case(part)
            if name not in mapper.relationships:
                raise InvalidFilterFieldException(model=model, field=path)
            attr = getattr(current, name)
            option = (
                selectinload(attr)
                if option is None
                else option.selectinload(attr)
            )
            current = mapper.relationships[name].mapper.class_
        return option

    def _filtered(
        self,
        model: str,
        entity: type[Base],
        filters: Optional[Mapping[str, Any]],
    ) -> Select:
        stmt = select(entity)

        if SOFT_DELETE_COLUMN in inspect(entity).column_attrs:
            stmt = stmt.where(getattr(entity, SOFT_DELETE_COLUMN).is_(None))

        for field, predicate in (filters or {}).items():
            column = self._column(model, entity, field)
            stmt = stmt.where(predicate_clause(column, predicate))

        return stmt

    def _search_clause(
        self,
        model: str,
        entity: type[Base],
        search: str,
        fields: Sequence[str],
    ) -> Any:
        return or_(
            *(
                self._column(model, entity, field).icontains(
                    search, autoescape=True
                )
                for field in fields
            )
        )

    async def find_many(self, model: str, spec: QuerySpec) -> PaginatedResult:
        entity = self._entity(model)
        stmt = self._filtered(model, entity, spec.custom_filters)

        if spec.search and spec.search_fields:
            stmt = stmt.where(
                self._search_clause(model, entity, spec.search, spec.search_fields)
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = int((await self.session.execute(count_stmt)).scalar_one())

        if spec.sort_by:
            column = self._column(model, entity, spec.sort_by)
            stmt = stmt.order_by(
                column.asc() if spec.sort_order == "asc" else column.desc()
            )
        # 동일 정렬 값에서도 페이지 경계가 흔들리지 않도록 PK 로 보조 정렬
        stmt = stmt.order_by(*inspect(entity).primary_key)

        for path in spec.relations:
            stmt = stmt.options(self._relation_option(model, entity, path))

        stmt = stmt.offset((spec.page - 1) * spec.limit).limit(spec.limit)
        result = await self.session.execute(stmt)

        return PaginatedResult(
            items=list(result.scalars().all()),
            meta=compute_meta(spec.page, spec.limit, total),
        )

    async def count(
        self, model: str, filters: Optional[dict[str, Any]] = None
    ) -> int:
        entity = self._entity(model)
        stmt = self._filtered(model, entity, filters)
        count_stmt = select(func.count()).select_from(stmt.subquery())
        result = await self.session.execute(count_stmt)
        return int(result.scalar_one())

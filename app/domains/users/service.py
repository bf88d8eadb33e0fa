"""Users 도메인 서비스

- UserAdminService: 관리자용 목록 조회 / 삭제
- UserService: 사용자 프로필 조회 / 수정 / 생성
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.query import (
    DefaultSort,
    QueryBuilderOptions,
    QueryBuilderService,
    SQLAlchemyQueryRepository,
)
from app.core.schemas import PaginatedResult
from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.models import User, UserRole
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import UserCreate, UserListQuery, UserUpdate

logger = get_logger(__name__)

USER_MODEL = "user"
USER_SEARCH_FIELDS = ["firstName", "lastName", "email"]
USER_DEFAULT_SORT = DefaultSort(field="createdAt", order="desc")


class UserAdminService:
    """관리자용 사용자 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = UserRepository(session)
        self.query_builder = QueryBuilderService(
            SQLAlchemyQueryRepository(session, {USER_MODEL: User})
        )

    async def list_users(self, query: UserListQuery) -> PaginatedResult:
        """사용자 목록 조회

        이름/이메일 검색, 권한/인증 여부/이메일 도메인 필터를 지원하며
        정렬이 없으면 가입일 최신순으로 조회합니다.
        """
        return await self.query_builder.find_many_with_pagination(
            QueryBuilderOptions(
                model=USER_MODEL,
                dto=query,
                default_sort=USER_DEFAULT_SORT,
                search_fields=USER_SEARCH_FIELDS,
            )
        )

    async def delete_user(self, user_id: int) -> None:
        """사용자 Soft Delete

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id=user_id)

        await self.repository.soft_delete(user)

        logger.info(
            "User deleted",
            extra={"user_id": user_id, "action": "deleted"},
        )


class UserService:
    """사용자 프로필 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = UserRepository(session)

    async def get_user_profile(self, user_id: int) -> Optional[User]:
        """ID로 프로필 조회"""
        return await self.repository.get_by_id(user_id)

    async def get_user_profile_by_email(self, email: str) -> Optional[User]:
        """이메일로 프로필 조회"""
        return await self.repository.get_by_email(email)

    async def update_user_profile(
        self, user_id: int, data: UserUpdate
    ) -> User:
        """프로필 수정

        전달된 필드만 반영하며 이름은 앞뒤 공백을 제거합니다.

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id=user_id)

        if data.first_name is not None:
            user.first_name = data.first_name.strip()
        if data.last_name is not None:
            user.last_name = data.last_name.strip()
        if data.email is not None:
            user.email = data.email
        if data.phone_number is not None:
            user.phone_number = data.phone_number
        if data.avatar is not None:
            user.avatar = data.avatar

        updated = await self.repository.update(user)
        logger.info(
            "User profile updated",
            extra={"user_id": user_id, "action": "updated"},
        )
        return updated

    async def create_user(self, data: UserCreate) -> User:
        """사용자 생성 (권한은 항상 USER)"""
        user = User(
            email=data.email,
            first_name=(data.first_name or "").strip(),
            last_name=(data.last_name or "").strip(),
            phone_number=data.phone_number,
            avatar=data.avatar,
            password=data.password,
            role=UserRole.USER,
        )
        created = await self.repository.create(user)
        logger.info(
            "User created",
            extra={"user_id": created.id, "action": "created"},
        )
        return created

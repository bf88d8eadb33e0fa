"""Users 도메인 리포지토리

단건 조회/생성/수정/삭제를 담당합니다.
목록/개수 조회는 SQLAlchemyQueryRepository 를 통해 쿼리 빌더가 처리합니다.
"""

from typing import Optional, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.datetime import now_utc
from app.domains.users.models import User


class UserRepository:
    """사용자 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(
        self, user_id: int, include_deleted: bool = False
    ) -> Optional[User]:
        """ID로 사용자 조회

        Args:
            user_id: 사용자 ID
            include_deleted: 삭제된 사용자 포함 여부 (기본: False)

        Returns:
            사용자 객체 또는 None
        """
        query = select(User).where(User.id == user_id)

        if not include_deleted:
            query = query.where(User.deleted_at.is_(None))

        result = await self.session.execute(query)
        return cast(Optional[User], result.scalar_one_or_none())

    async def get_by_email(self, email: str) -> Optional[User]:
        """이메일로 사용자 조회 (삭제된 사용자 제외)"""
        query = select(User).where(
            User.email == email, User.deleted_at.is_(None)
        )
        result = await self.session.execute(query)
        return cast(Optional[User], result.scalar_one_or_none())

    async def create(self, user: User) -> User:
        """사용자 생성"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """사용자 수정"""
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def soft_delete(self, user: User) -> User:
        """사용자 Soft Delete"""
        user.deleted_at = now_utc()
        await self.session.flush()
        await self.session.refresh(user)
        return user

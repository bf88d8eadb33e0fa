"""테스트 설정"""

from datetime import datetime, timezone

import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.core.database import Base
from app.domains.users.models import User, UserRole

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_engine():
    """인메모리 SQLite 엔진 (테스트마다 새 스키마)"""
    engine = create_async_engine(
        TEST_DATABASE_URL, echo=False, poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """테스트 데이터베이스 세션"""
    async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


def _at(day: int) -> datetime:
    return datetime(2023, 1, day, 9, 0, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def seeded_users(db_session):
    """목록 조회용 사용자 데이터

    id | email               | 이름          | role  | 인증 | 가입일
    1  | john@example.com    | John Smith    | USER  | O    | 01-01
    2  | jane@example.com    | Jane Smith    | ADMIN | O    | 01-02
    3  | bob@gmail.com       | Bob Brown     | USER  | X    | 01-03
    4  | alice@gmail.com     | Alice Johnson | ADMIN | X    | 01-04
    5  | deleted@example.com | Del Eted      | USER  | O    | 01-05 (삭제됨)
    """
    users = [
        User(
            id=1,
            email="john@example.com",
            first_name="John",
            last_name="Smith",
            role=UserRole.USER,
            is_verified=True,
            created_at=_at(1),
        ),
        User(
            id=2,
            email="jane@example.com",
            first_name="Jane",
            last_name="Smith",
            role=UserRole.ADMIN,
            is_verified=True,
            created_at=_at(2),
        ),
        User(
            id=3,
            email="bob@gmail.com",
            first_name="Bob",
            last_name="Brown",
            role=UserRole.USER,
            is_verified=False,
            created_at=_at(3),
        ),
        User(
            id=4,
            email="alice@gmail.com",
            first_name="Alice",
            last_name="Johnson",
            role=UserRole.ADMIN,
            is_verified=False,
            created_at=_at(4),
        ),
        User(
            id=5,
            email="deleted@example.com",
            first_name="Del",
            last_name="Eted",
            role=UserRole.USER,
            is_verified=True,
            created_at=_at(5),
            deleted_at=_at(6),
        ),
    ]
    db_session.add_all(users)
    await db_session.flush()
    return users

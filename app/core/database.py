from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

# 비동기 엔진 생성
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
)

# 비동기 세션 팩토리
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 모델 베이스 클래스"""

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """데이터베이스 세션 의존성"""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def check_database_health(
    db_engine: AsyncEngine | None = None,
) -> dict[str, Any]:
    """데이터베이스 연결 상태 확인

    Returns:
        {"database": {"status": "up" | "down", ...}}
    """
    try:
        async with (db_engine or engine).connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Database health check failed", exc_info=True)
        return {
            "database": {
                "status": "down",
                "connection": "failed",
                "error": str(e),
            }
        }
    return {"database": {"status": "up", "connection": "active"}}


async def close_db() -> None:
    """데이터베이스 연결 종료"""
    await engine.dispose()
    logger.info("Database connection closed")

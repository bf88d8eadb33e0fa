"""Users 도메인 모델 정의

관리자 목록 조회와 프로필 관리를 위한 사용자 모델입니다.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class UserRole(str, Enum):
    """사용자 권한"""

    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    """사용자 모델"""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, comment="이메일"
    )
    password: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="비밀번호 해시"
    )
    first_name: Mapped[str] = mapped_column(
        String(100), default="", comment="이름"
    )
    last_name: Mapped[str] = mapped_column(
        String(100), default="", comment="성"
    )
    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, name="user_role"),
        default=UserRole.USER,
        comment="권한",
    )
    is_verified: Mapped[bool] = mapped_column(
        default=False, comment="이메일 인증 여부"
    )
    phone_number: Mapped[Optional[str]] = mapped_column(
        String(30), nullable=True, comment="전화번호"
    )
    avatar: Mapped[Optional[str]] = mapped_column(
        String(500), nullable=True, comment="프로필 이미지 URL"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="삭제 일시 (Soft Delete)"
    )

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, email={self.email}, role={self.role}, "
            f"deleted_at={self.deleted_at})>"
        )

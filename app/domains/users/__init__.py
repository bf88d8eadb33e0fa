"""Users 도메인 모듈

관리자 사용자 목록 조회와 프로필 관리를 위한 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (User, UserRole)
    - schemas.py: Pydantic 스키마 (UserListQuery, UserResponse, etc.)
    - repository.py: 단건 데이터 접근 계층
    - service.py: 비즈니스 로직 (목록 조회, 삭제, 프로필)
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import UserErrorCode, UserNotFoundException
from app.domains.users.models import User, UserRole
from app.domains.users.schemas import (
    UserCreate,
    UserListQuery,
    UserResponse,
    UserUpdate,
)
from app.domains.users.service import UserAdminService, UserService

__all__ = [
    "User",
    "UserRole",
    "UserAdminService",
    "UserService",
    "UserListQuery",
    "UserResponse",
    "UserCreate",
    "UserUpdate",
    "UserErrorCode",
    "UserNotFoundException",
]

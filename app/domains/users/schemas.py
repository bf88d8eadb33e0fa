"""Users 도메인 스키마 정의

UserListQuery 는 요청 쿼리 파라미터 이름(camelCase)을 alias 로 유지합니다.
쿼리 빌더가 필드 이름 접미사(Domain, Name, Date)로 필터를 결정하기 때문입니다.
"""

from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.domains.users.models import UserRole


class UserListQuery(BaseModel):
    """사용자 목록 조회 요청 스키마

    page/limit 범위는 쿼리 빌더가 보정하므로 여기서는 검증하지 않습니다.
    """

    model_config = ConfigDict(populate_by_name=True)

    page: Optional[int] = Field(default=None, description="페이지 번호")
    limit: Optional[int] = Field(default=None, description="페이지 크기")
    search: Optional[str] = Field(default=None, description="검색어")
    sort_by: Optional[str] = Field(
        default=None, alias="sortBy", description="정렬 필드"
    )
    sort_order: Optional[Literal["asc", "desc"]] = Field(
        default=None, alias="sortOrder", description="정렬 방향"
    )
    role: Optional[Union[UserRole, list[UserRole]]] = Field(
        default=None, description="권한 필터"
    )
    is_verified: Optional[bool] = Field(
        default=None, alias="isVerified", description="인증 여부 필터"
    )
    email_domain: Optional[str] = Field(
        default=None,
        alias="emailDomain",
        description="이메일 도메인 필터",
        examples=["gmail.com"],
    )


class UserResponse(BaseModel):
    """사용자 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    is_verified: bool
    phone_number: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class UserCreate(BaseModel):
    """사용자 생성 스키마

    password 는 해시된 값을 전달합니다.
    """

    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    avatar: Optional[str] = None
    password: Optional[str] = None


class UserUpdate(BaseModel):
    """사용자 프로필 수정 스키마"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None
    avatar: Optional[str] = None

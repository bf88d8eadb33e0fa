"""Users 서비스 단위 테스트"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.core.query.types import DefaultSort, QueryBuilderOptions
from app.core.schemas import PaginatedResult
from app.core.utils.pagination import compute_meta
from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.models import User, UserRole
from app.domains.users.schemas import UserCreate, UserListQuery, UserUpdate
from app.domains.users.service import UserAdminService, UserService


@pytest.fixture
def mock_session():
    """Mock AsyncSession"""
    return MagicMock()


@pytest.fixture
def admin_service(mock_session):
    """UserAdminService 인스턴스"""
    return UserAdminService(mock_session)


@pytest.fixture
def user_service(mock_session):
    """UserService 인스턴스"""
    return UserService(mock_session)


def make_user(**kwargs) -> User:
    defaults = {
        "id": 1,
        "email": "test@example.com",
        "first_name": "Test",
        "last_name": "User",
        "role": UserRole.USER,
        "is_verified": True,
        "created_at": datetime(2023, 1, 1),
    }
    defaults.update(kwargs)
    return User(**defaults)


class TestUserAdminServiceList:
    """관리자 목록 조회 테스트"""

    @pytest.mark.asyncio
    async def test_list_users(self, admin_service):
        """쿼리 빌더에 모델/기본 정렬/검색 필드를 전달"""
        # Given
        query = UserListQuery(page=1, limit=10, search="test")
        expected = PaginatedResult(
            items=[make_user(id=1), make_user(id=2, email="b@example.com")],
            meta=compute_meta(1, 10, 2),
        )
        admin_service.query_builder.find_many_with_pagination = AsyncMock(
            return_value=expected
        )

        # When
        result = await admin_service.list_users(query)

        # Then
        assert result is expected
        admin_service.query_builder.find_many_with_pagination.assert_called_once_with(
            QueryBuilderOptions(
                model="user",
                dto=query,
                default_sort=DefaultSort(field="createdAt", order="desc"),
                search_fields=["firstName", "lastName", "email"],
            )
        )

    @pytest.mark.asyncio
    async def test_list_users_empty_criteria(self, admin_service):
        """조건이 없어도 같은 옵션으로 조회"""
        query = UserListQuery()
        admin_service.query_builder.find_many_with_pagination = AsyncMock(
            return_value=PaginatedResult(items=[], meta=compute_meta(1, 10, 0))
        )

        result = await admin_service.list_users(query)

        assert result.items == []
        assert result.meta.total_pages == 0
        options = admin_service.query_builder.find_many_with_pagination.call_args.args[0]
        assert options.dto is query
        assert options.model == "user"


class TestUserAdminServiceDelete:
    """관리자 삭제 테스트"""

    @pytest.mark.asyncio
    async def test_delete_user_success(self, admin_service):
        """사용자 Soft Delete 성공"""
        # Given
        user = make_user()
        admin_service.repository.get_by_id = AsyncMock(return_value=user)
        admin_service.repository.soft_delete = AsyncMock()

        # When
        with patch("app.domains.users.service.logger") as mock_logger:
            await admin_service.delete_user(1)

            # Then
            admin_service.repository.get_by_id.assert_called_once_with(1)
            admin_service.repository.soft_delete.assert_called_once_with(user)
            mock_logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_user_not_found(self, admin_service):
        """없는 사용자 삭제 시 예외, 삭제 미호출"""
        admin_service.repository.get_by_id = AsyncMock(return_value=None)
        admin_service.repository.soft_delete = AsyncMock()

        with pytest.raises(UserNotFoundException) as exc_info:
            await admin_service.delete_user(999)

        assert exc_info.value.detail_info == {"user_id": 999}
        admin_service.repository.soft_delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_user_lookup_error_propagates(self, admin_service):
        """조회 중 DB 예외는 그대로 전파"""
        admin_service.repository.get_by_id = AsyncMock(
            side_effect=RuntimeError("Database connection failed")
        )

        with pytest.raises(RuntimeError, match="Database connection failed"):
            await admin_service.delete_user(1)

    @pytest.mark.asyncio
    async def test_delete_user_soft_delete_error_propagates(
        self, admin_service
    ):
        """삭제 중 DB 예외는 그대로 전파"""
        admin_service.repository.get_by_id = AsyncMock(return_value=make_user())
        admin_service.repository.soft_delete = AsyncMock(
            side_effect=RuntimeError("Delete failed")
        )

        with pytest.raises(RuntimeError, match="Delete failed"):
            await admin_service.delete_user(1)


class TestUserServiceProfile:
    """프로필 서비스 테스트"""

    @pytest.mark.asyncio
    async def test_get_user_profile(self, user_service):
        """ID로 프로필 조회"""
        user = make_user()
        user_service.repository.get_by_id = AsyncMock(return_value=user)

        assert await user_service.get_user_profile(1) is user

    @pytest.mark.asyncio
    async def test_get_user_profile_missing_returns_none(self, user_service):
        """없는 사용자는 None"""
        user_service.repository.get_by_id = AsyncMock(return_value=None)

        assert await user_service.get_user_profile(999) is None

    @pytest.mark.asyncio
    async def test_get_user_profile_by_email(self, user_service):
        """이메일로 프로필 조회"""
        user = make_user()
        user_service.repository.get_by_email = AsyncMock(return_value=user)

        result = await user_service.get_user_profile_by_email(
            "test@example.com"
        )

        assert result is user
        user_service.repository.get_by_email.assert_called_once_with(
            "test@example.com"
        )

    @pytest.mark.asyncio
    async def test_update_user_profile_trims_names(self, user_service):
        """이름은 공백 제거, 전달되지 않은 필드는 유지"""
        # Given
        user = make_user(phone_number="+821012345678")
        user_service.repository.get_by_id = AsyncMock(return_value=user)
        user_service.repository.update = AsyncMock(side_effect=lambda u: u)

        # When
        with patch("app.domains.users.service.logger"):
            result = await user_service.update_user_profile(
                1, UserUpdate(first_name="  John ", last_name=" Doe  ")
            )

        # Then
        assert result.first_name == "John"
        assert result.last_name == "Doe"
        assert result.email == "test@example.com"
        assert result.phone_number == "+821012345678"
        user_service.repository.update.assert_called_once_with(user)

    @pytest.mark.asyncio
    async def test_update_user_profile_not_found(self, user_service):
        """없는 사용자 수정 시 예외"""
        user_service.repository.get_by_id = AsyncMock(return_value=None)
        user_service.repository.update = AsyncMock()

        with pytest.raises(UserNotFoundException):
            await user_service.update_user_profile(999, UserUpdate())

        user_service.repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_user_forces_user_role(self, user_service):
        """생성 시 권한은 USER, 이름은 공백 제거"""
        user_service.repository.create = AsyncMock(side_effect=lambda u: u)

        with patch("app.domains.users.service.logger"):
            result = await user_service.create_user(
                UserCreate(
                    email="new@example.com",
                    first_name=" New ",
                    password="hashed-password",
                )
            )

        assert result.role == UserRole.USER
        assert result.email == "new@example.com"
        assert result.first_name == "New"
        assert result.last_name == ""
        assert result.password == "hashed-password"

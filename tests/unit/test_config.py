"""Config 설정 검증 테스트"""

import pytest
from pydantic import ValidationError

from app.core.config import DEFAULT_DATABASE_URL, Settings

PRODUCTION_DATABASE_URL = "postgresql+asyncpg://app:secret@db:5432/auth_users"


class TestDevelopmentConfig:
    """개발 환경 설정 테스트"""

    def test_development_allows_default_database_url(self):
        """개발 환경에서는 기본 DB URL 허용"""
        config = Settings(app_env="development")

        assert config.is_development
        assert config.database_url == DEFAULT_DATABASE_URL


class TestProductionConfig:
    """프로덕션 환경 설정 검증 테스트"""

    def test_production_rejects_default_database_url(self):
        """프로덕션에서 기본 DB URL 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(app_env="production", debug=False)

        assert "DATABASE_URL" in str(exc_info.value)

    def test_production_rejects_debug(self):
        """프로덕션에서 DEBUG 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                debug=True,
                database_url=PRODUCTION_DATABASE_URL,
            )

        assert "DEBUG" in str(exc_info.value)

    def test_production_accepts_valid_settings(self):
        """프로덕션에서 유효한 설정 허용"""
        config = Settings(
            app_env="production",
            debug=False,
            database_url=PRODUCTION_DATABASE_URL,
        )

        assert config.is_production
        assert not config.is_development

"""Tests for settings, engine construction and logging setup."""

import logging

import pytest

from promo_store.core.config import Settings
from promo_store.core.database import create_engine
from promo_store.core.logging import configure_logging
from promo_store.services import PaginationPolicy


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL.startswith("postgresql+asyncpg://")
        assert settings.DEFAULT_PAGE_SIZE == 10
        assert settings.MAX_PAGE_SIZE is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///override.db")
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL == "sqlite+aiosqlite:///override.db"
        assert settings.DEFAULT_PAGE_SIZE == 25

    def test_policy_from_settings(self):
        settings = Settings(_env_file=None, DEFAULT_PAGE_SIZE=20, MAX_PAGE_SIZE=40)

        policy = PaginationPolicy(settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)

        assert policy.resolve().size == 20


class TestCreateEngine:
    """Test engine options per backend."""

    @pytest.mark.asyncio
    async def test_pool_options_for_server_database(self):
        settings = Settings(_env_file=None, DB_POOL_SIZE=7)

        engine = create_engine(settings)
        try:
            assert engine.url.get_driver_name() == "asyncpg"
            assert engine.pool.size() == 7
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_sqlite_uses_dialect_defaults(self, tmp_path):
        engine = create_engine(
            Settings(_env_file=None), url=f"sqlite+aiosqlite:///{tmp_path / 'x.db'}"
        )
        try:
            assert engine.url.get_backend_name() == "sqlite"
        finally:
            await engine.dispose()


class TestConfigureLogging:
    """Test logging setup."""

    def test_quiets_sqlalchemy_engine(self):
        configure_logging("info")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("verbose")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

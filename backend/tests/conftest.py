"""Pytest configuration and fixtures for testing."""

from typing import AsyncGenerator, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from promo_store.core.config import Settings
from promo_store.core.database import create_engine, create_session_maker, init_models
from promo_store.models import CampaignStatus
from promo_store.schemas import CampaignCreate
from promo_store.services import Stores, build_stores


# SQLite database file per test
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine on a fresh SQLite database with all tables."""
    engine = create_engine(
        Settings(DEBUG=False),
        url=f"sqlite+aiosqlite:///{tmp_path / 'promo_store.db'}",
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_maker(engine)


@pytest.fixture
def stores(session_maker: async_sessionmaker[AsyncSession]) -> Stores:
    return build_stores(session_maker)


# Campaign creation data factory
@pytest.fixture
def make_campaign() -> Callable[..., CampaignCreate]:
    """Return a factory for campaign creation data."""

    def _make(name: str = "Spring Draw", **overrides) -> CampaignCreate:
        data = {
            "name": name,
            "description": "Test campaign",
            "start_time": 1_760_000_000,
            "end_time": 1_760_003_600,
            "status": CampaignStatus.ACTIVE,
        }
        data.update(overrides)
        return CampaignCreate(**data)

    return _make


# Mock session factory for failure injection
@pytest.fixture
def mock_session() -> AsyncMock:
    """Create a mock AsyncSession."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_session_maker(mock_session: AsyncMock) -> MagicMock:
    """Create a mock session factory that always yields ``mock_session``."""
    session_cm = MagicMock()
    session_cm.__aenter__ = AsyncMock(return_value=mock_session)
    session_cm.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=session_cm)

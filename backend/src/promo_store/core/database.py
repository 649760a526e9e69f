from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from promo_store.core.config import Settings, settings as default_settings


class Base(DeclarativeBase):
    pass


def create_engine(
    settings: Settings | None = None, url: str | None = None
) -> AsyncEngine:
    """Build the async engine (and its connection pool) for the store.

    Pool sizing and the asyncpg ``command_timeout`` only apply to server
    databases; SQLite URLs get the dialect defaults.
    """
    settings = settings or default_settings
    database_url = make_url(url or settings.DATABASE_URL)

    kwargs: dict = {"echo": settings.DEBUG}
    if database_url.get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=True,  # Verify connection health before use
        )
    if database_url.get_driver_name() == "asyncpg":
        kwargs["connect_args"] = {"command_timeout": settings.DB_COMMAND_TIMEOUT}

    return create_async_engine(database_url, **kwargs)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Stores hand back ORM instances after their session closes
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    import promo_store.models  # noqa: F401  registers the mappers

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_models(engine: AsyncEngine) -> None:
    import promo_store.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


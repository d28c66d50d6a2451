"""Async SQLAlchemy engine and session factory construction."""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from bankpage.common.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the process-wide async engine; its pool is the only shared resource."""
    kwargs: dict = {"echo": False, "pool_pre_ping": settings.db_pool_pre_ping}
    # SQLite (tests, local seeding) may run on a static pool that rejects sizing
    if not settings.database_url.startswith("sqlite"):
        kwargs["pool_size"] = settings.db_pool_size
        kwargs["max_overflow"] = settings.db_max_overflow
    return create_async_engine(settings.database_url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

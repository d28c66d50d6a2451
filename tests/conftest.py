"""Shared test fixtures for the bank pager test suite."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from bankpage.common.config import Settings
from bankpage.common.database import create_engine, create_session_factory
from bankpage.common.models import Base
from tests.factories import JAN_1, JAN_2, JAN_3, make_bank


@pytest.fixture
def mock_db_session():
    """Mock async SQLAlchemy session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
async def sqlite_engine(tmp_path):
    """File-backed SQLite engine with the bank schema created."""
    settings = Settings(_env_file=None, database_url=f"sqlite+aiosqlite:///{tmp_path / 'bank.db'}")
    engine = create_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def sqlite_session_factory(sqlite_engine):
    return create_session_factory(sqlite_engine)


@pytest.fixture
async def seeded_session(sqlite_session_factory):
    """Session over a table holding banks updated on Jan 1, 2 and 3 of 2024."""
    async with sqlite_session_factory() as session:
        session.add_all([make_bank(1, JAN_1), make_bank(2, JAN_2), make_bank(3, JAN_3)])
        await session.commit()
        yield session

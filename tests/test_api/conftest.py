"""API test fixtures -- AsyncClient with dependency overrides."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from bankpage.api.deps import get_db, get_pagination_service
from bankpage.api.main import create_app
from bankpage.service.pagination import PaginationService


@pytest.fixture
def mock_service():
    return AsyncMock(spec=PaginationService)


@pytest.fixture
def mock_api_db_session():
    session = AsyncMock()
    session.execute = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def app(mock_service, mock_api_db_session):
    """Create app with the service and session overridden."""
    application = create_app()
    application.dependency_overrides[get_pagination_service] = lambda: mock_service
    application.dependency_overrides[get_db] = lambda: mock_api_db_session
    return application


@pytest.fixture
async def client(app):
    """Async test client that bypasses lifespan."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_client(sqlite_session_factory, seeded_session):
    """Client wired through the real service and store onto the seeded SQLite table."""
    application = create_app()
    application.state.session_factory = sqlite_session_factory
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

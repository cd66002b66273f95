"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.shop_common.database import get_db_session


@pytest.fixture
def db_session() -> MagicMock:
    """Stand-in AsyncSession: execute/commit/rollback are awaitable mocks."""
    session = MagicMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest_asyncio.fixture
async def client(db_session: MagicMock) -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints; get_db_session yields db_session."""

    async def _override_db():
        yield db_session

    app.dependency_overrides[get_db_session] = _override_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_db_session, None)

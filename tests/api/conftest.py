"""API test fixtures — ASGI client with the store swapped for an in-memory one.

Design Decisions:
    - ASGITransport does not run the lifespan, so no database is opened;
      get_store is overridden instead of initialized
"""

import pytest
from httpx import ASGITransport, AsyncClient

from rosterboard.api.dependencies import get_store
from rosterboard.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client backed by the in-memory repository."""
    app.dependency_overrides[get_store] = lambda: store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def failing_client(failing_store):
    """Client whose repository fails every save and health check."""
    app.dependency_overrides[get_store] = lambda: failing_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()

"""API test fixtures — FastAPI test clients bound to the test database.

Invariants:
    - db_manager patched so get_db and the readiness probe see the test engine
    - client overrides get_db with the test session factory
    - session_client keeps the real get_db, so DatabaseSessionManager.session
      maps driver errors exactly as in production
    - A fresh app per test: create_app() builds a new route table each call
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.database import get_db, DatabaseSessionManager
import app.infrastructure.database as db_module
from app.main import create_app


@pytest.fixture
def test_db_manager(test_engine, test_session_factory, monkeypatch):
    """DatabaseSessionManager wrapping the in-memory test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    monkeypatch.setattr(db_module, "db_manager", manager)
    return manager


@pytest.fixture
async def client(test_db_manager, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    app = create_app()

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def session_client(test_db_manager):
    """FastAPI test client using the real get_db dependency."""
    async with AsyncClient(
        transport=ASGITransport(app=create_app()), base_url="http://test",
    ) as c:
        yield c

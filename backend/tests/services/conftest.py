"""Service test fixtures — async DB, fake identity provider and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - app.state.identity_provider is a FakeIdentityProvider (no network)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - StaticPool: one connection shared by every session, so the in-memory
      database survives across the sessions a single request opens
    - Tokens travel as Bearer headers in route tests; the cookie path is
      covered separately in test_auth_api.py
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import sports_events.infrastructure.database as db_module
from sports_events.db.base import Base
from sports_events.db.session import create_session_factory
from sports_events.infrastructure.database import DatabaseSessionManager, get_db
from sports_events.main import app
from sports_events.models.event import Event  # noqa: F401 (registers table)
from sports_events.services.event_repository import SqlAlchemyEventRepository
from tests.services.fake_identity_provider import (
    ALICE_TOKEN, BOB_TOKEN, FakeIdentityProvider,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(engine=test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def repository(test_db):
    return SqlAlchemyEventRepository(test_db, default_page_size=10)


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
async def client(test_engine, test_session_factory, identity_provider):
    """FastAPI test client with DB dependency and auth provider overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.identity_provider = identity_provider

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.identity_provider = None
    db_module.db_manager = original_manager


@pytest.fixture
def alice_headers():
    return {"Authorization": f"Bearer {ALICE_TOKEN}"}


@pytest.fixture
def bob_headers():
    return {"Authorization": f"Bearer {BOB_TOKEN}"}

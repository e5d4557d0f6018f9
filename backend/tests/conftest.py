"""
Pytest Configuration and Shared Fixtures.

- engine / db: in-memory SQLite database with all tables created
- client: AsyncClient for API testing, wired to the same database
- auth_headers: bearer headers for a given user id
- make_business: insert a business straight through the store
"""

import os

# Settings are read once at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from villageconnect.api.deps import create_access_token
from villageconnect.database import Base, get_db
from villageconnect.main import app
from villageconnect.schemas.business import BusinessCreate
from villageconnect.schemas.user import UserUpsert
from villageconnect.services.business_service import BusinessService
from villageconnect.services.user_service import UserService


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    """A session for driving services directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app, with get_db pointed at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build Authorization headers for a user id plus optional profile claims."""

    def _headers(user_id: str, **claims) -> dict:
        token = create_access_token(user_id, extra_claims=claims or None)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def make_business(db):
    """Create a business (and its owner) through the store."""

    async def _make(name: str, category: str = "other", owner_id: str = "u1", **fields):
        await UserService(db).upsert(UserUpsert(id=owner_id))
        data = BusinessCreate(name=name, category=category, **fields)
        return await BusinessService(db).create(data, owner_id=owner_id)

    return _make

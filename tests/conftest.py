"""
Shared test fixtures for the Pasha Furniture test suite.

Every test gets its own in-memory aiosqlite database and an empty session
store; the app's ``get_db`` dependency is overridden to use it.
"""

import os
import sys
from typing import AsyncGenerator

import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CORS_ORIGINS"] = '["*"]'
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["DEFAULT_LANGUAGE"] = "fa"

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.v1.deps import get_db
from app.core.rate_limit import limiter
from app.core.sessions import session_manager
from app.crud.user import create_user
from app.db.base import Base
from app.main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
CUSTOMER_USERNAME = "customer"
CUSTOMER_PASSWORD = "customer123"


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh in-memory database wired into the app for one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    session_manager.clear()
    limiter.reset()

    yield factory

    app.dependency_overrides.pop(get_db, None)
    session_manager.clear()
    limiter.reset()
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Return a raw database session for direct queries in tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Return a httpx AsyncClient wired to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def admin_user(db_session: AsyncSession):
    return await create_user(db_session, ADMIN_USERNAME, ADMIN_PASSWORD, is_admin=True)


@pytest.fixture
async def customer_user(db_session: AsyncSession):
    return await create_user(db_session, CUSTOMER_USERNAME, CUSTOMER_PASSWORD)


@pytest.fixture
async def admin_client(async_client: AsyncClient, admin_user) -> AsyncClient:
    """Client holding a logged-in admin session cookie."""
    resp = await async_client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert resp.status_code == 200, resp.text
    return async_client


@pytest.fixture
async def customer_client(async_client: AsyncClient, customer_user) -> AsyncClient:
    """Client holding a logged-in non-admin session cookie."""
    resp = await async_client.post(
        "/api/auth/login", json={"username": CUSTOMER_USERNAME, "password": CUSTOMER_PASSWORD}
    )
    assert resp.status_code == 200, resp.text
    return async_client

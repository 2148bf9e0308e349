"""Shared fixtures: in-memory SQLite database + ASGI test client.

Every test gets a fresh database; the app's get_db dependency is overridden
to hand out sessions bound to it.
"""
import os

# Must be set before any app module reads settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ORDER_DB_SCHEMA", "")
os.environ.setdefault("TRACING_ENABLED", "false")
os.environ.setdefault("API_PREFIX", "/api/v1")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shared.config.database import Base, get_db
from services.order_service.main import order_app
from services.order_service.schemas import OrderCreate


@pytest.fixture
async def test_engine():
    # StaticPool: one shared connection, so every session sees the same :memory: DB
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


async def _client(test_session_factory, raise_app_exceptions=True):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    order_app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=order_app, raise_app_exceptions=raise_app_exceptions)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        order_app.dependency_overrides.clear()


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with the DB dependency overridden."""
    async for c in _client(test_session_factory):
        yield c


@pytest.fixture
async def lenient_client(test_session_factory):
    """Like ``client`` but returns 500 responses instead of re-raising server errors."""
    async for c in _client(test_session_factory, raise_app_exceptions=False):
        yield c


@pytest.fixture
def order_payload():
    return {"customerId": "cust-1", "productId": 100, "quantity": 2}


@pytest.fixture
def order_create(order_payload):
    return OrderCreate.model_validate(order_payload)

"""Shared test fixtures for the outreach dashboard API tests.

Each test gets its own throwaway SQLite file so the concurrent loads of a
view see the same data through separate connections.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.database import Base, get_session_factory
from app.main import app
from app.services.auth import create_access_token

# Import all models to ensure they're registered with Base.metadata
from app import models  # noqa: F401


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Create all tables in a fresh database, drop the engine after."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    """Async HTTP test client."""
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db(session_factory):
    """Direct DB session for test setup/assertions."""
    async with session_factory() as session:
        yield session


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}


@pytest.fixture
def headers():
    """Bearer headers for the default test user."""
    return auth_headers("user_test")


@pytest.fixture
def other_headers():
    return auth_headers("user_other")


@pytest_asyncio.fixture
async def business(client, headers):
    """A business owned by the default test user."""
    resp = await client.post("/api/v1/businesses/", headers=headers, json={
        "name": "Acme",
        "service_type": "Plumbing",
    })
    return resp.json()["record"]


@pytest_asyncio.fixture
async def lead(client, headers, business):
    resp = await client.post("/api/v1/leads/", headers=headers, json={
        "business_id": business["id"],
        "name": "Jane Doe",
        "phone": "+1555",
    })
    return resp.json()["record"]

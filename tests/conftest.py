"""Shared test fixtures for the salon admin API tests.

Uses an in-memory SQLite async engine so tests run without PostgreSQL.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from salon_admin.core.database import Base
from salon_admin.core.deps import get_store
from salon_admin.main import app
from salon_admin.services.sql_store import build_sql_store
from salon_admin.services.kv_store import build_kv_store

# Import all models to ensure they're registered with Base.metadata
from salon_admin.models.appointment import Appointment  # noqa: F401
from salon_admin.models.client import Client  # noqa: F401
from salon_admin.models.product import Product  # noqa: F401
from salon_admin.models.service import Service  # noqa: F401


# Use aiosqlite for fast, isolated tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(TEST_DATABASE_URL, echo=False)
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

test_store = build_sql_store(TestSession)


@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_store():
    return test_store


app.dependency_overrides[get_store] = override_get_store


@pytest_asyncio.fixture
async def client():
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def store():
    """SQL-backed entity store sharing the test database."""
    return test_store


@pytest.fixture
def kv_store(tmp_path):
    """Key-value store persisted in a temporary JSON file."""
    return build_kv_store(tmp_path / "salon_store.json")


@pytest_asyncio.fixture
async def salon(client):
    """A client, two services and a product created through the API."""
    jane = (await client.post("/api/v1/clients", json={
        "full_name": "Jane Doe",
        "phone": "11999990000",
        "email": "jane@example.com",
    })).json()["data"]
    cut = (await client.post("/api/v1/services", json={
        "name": "Cut",
        "category": "Hair",
        "duration_minutes": 45,
        "price": 50,
    })).json()["data"]
    nails = (await client.post("/api/v1/services", json={
        "name": "Manicure",
        "category": "Nails",
        "duration_minutes": 30,
        "price": 35,
    })).json()["data"]
    shampoo = (await client.post("/api/v1/products", json={
        "name": "Shampoo",
        "category": "Hair",
        "quantity": 3,
        "minimum_stock": 5,
        "price": 29.9,
    })).json()["data"]
    return {"client": jane, "cut": cut, "nails": nails, "shampoo": shampoo}

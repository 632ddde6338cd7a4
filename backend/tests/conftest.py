"""
NYB Restaurant Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── memory_store: Fresh InMemoryDocumentStore
    ├── sql_store: SqlDocumentStore on a temporary SQLite file (aiosqlite)
    ├── store: Parametrized over both, for gateway contract tests
    ├── test_client: HTTPX AsyncClient against an app using memory_store
    ├── sample_menu_item / sample_order: Request payloads
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["STORE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "http://localhost:5173,http://test.example"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from restaurant_api.config import settings
from restaurant_api.main import create_app
from restaurant_api.services.memory_store import InMemoryDocumentStore
from restaurant_api.services.sql_store import SqlDocumentStore


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest_asyncio.fixture
async def sql_store(tmp_path):
    """
    SQL document store on a throwaway SQLite database.

    Tables are created through the same create_tables() path the app uses
    at startup.
    """
    store = SqlDocumentStore.from_settings(
        settings, url=f"sqlite+aiosqlite:///{tmp_path / 'documents.db'}"
    )
    await store.create_tables()
    yield store
    await store.close()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def store(request, tmp_path):
    """Each gateway contract test runs once per store implementation."""
    if request.param == "memory":
        yield InMemoryDocumentStore()
        return

    sql = SqlDocumentStore.from_settings(
        settings, url=f"sqlite+aiosqlite:///{tmp_path / 'contract.db'}"
    )
    await sql.create_tables()
    yield sql
    await sql.close()


@pytest_asyncio.fixture
async def test_client(memory_store):
    """
    Async HTTP client talking to a fresh app over ASGI.

    ASGITransport does not run the lifespan, so the store is injected
    directly through create_app().
    """
    app = create_app(store=memory_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_menu_item():
    return {
        "name": "Burger",
        "price": 9.5,
        "category": "mains",
        "isAvailable": True,
        "description": "Double patty, cheddar, pickles",
        "tags": ["beef", "popular"],
    }


@pytest.fixture
def sample_order():
    return {
        "status": "pending",
        "items": [{"name": "Burger", "quantity": 2}],
        "customer": {"name": "Sam", "phone": "555-0100"},
        "total": 19.0,
    }

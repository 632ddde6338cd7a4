"""
NYB Restaurant Backend — Store Construction & Injection
=========================================================

What:  Builds the configured DocumentStore and exposes it to route handlers.
How:   The application keeps one store handle on `app.state.store`; the
       `get_store` dependency hands it to each handler through Depends().
       Tests replace it by passing their own store to `create_app()`.
"""

import logging

from fastapi import Request

from restaurant_api.config import Settings
from restaurant_api.services.memory_store import InMemoryDocumentStore
from restaurant_api.services.sql_store import SqlDocumentStore
from restaurant_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)


async def build_store(settings: Settings) -> DocumentStore:
    """
    Create and verify the store selected by STORE_BACKEND.

    Raises:
        DatabaseError: The SQL backend is unreachable (startup must abort).
    """
    if settings.store_backend == "memory":
        logger.warning("Using in-memory document store; data is lost on restart")
        return InMemoryDocumentStore()

    store = SqlDocumentStore.from_settings(settings)
    try:
        await store.ping()
        if settings.db_create_tables:
            await store.create_tables()
    except Exception:
        await store.close()
        raise
    return store


def get_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the application's store handle."""
    return request.app.state.store

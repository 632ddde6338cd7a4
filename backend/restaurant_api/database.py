"""
NYB Restaurant Backend — Database Engine Management
=====================================================

What:  Async SQLAlchemy engine and session factory builders, plus the
       declarative base shared by the document tables.
How:   The SQL document store calls `build_engine()` / `build_session_factory()`
       when it is created in the application lifespan; nothing connects at
       import time.
Who:   Used by `services/sql_store.py`, Alembic and the SQL store tests.

Connection Pooling:
    pool_size / max_overflow come from settings for server databases.
    SQLite (used by the test suite) gets SQLAlchemy's default pool, since
    QueuePool sizing arguments do not apply to it.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from restaurant_api.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers the document tables with a single metadata object, which
    Alembic reads for migrations and `create_all` uses at startup.
    """
    pass


def build_engine(settings: Settings, url: Optional[str] = None) -> AsyncEngine:
    """
    Create the async engine for the document store.

    Args:
        settings: Application settings (pool sizing, log level)
        url:      Override for the connection URL (tests pass SQLite URLs)
    """
    url = url or settings.sqlalchemy_url
    options = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        # Echo SQL in DEBUG mode only
        "echo": settings.log_level == "DEBUG",
    }
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return create_async_engine(url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to `engine`.

    expire_on_commit=False keeps loaded attributes readable after commit,
    which the store relies on when it serializes a row it just updated.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

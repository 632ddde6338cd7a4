"""
NYB Restaurant Backend — SQL Document Store
=============================================

What:  DocumentStore backed by async SQLAlchemy: one table per collection,
       one row per document (see models/document.py).
How:   Every gateway call runs in its own short transaction from the
       session factory; success commits, any exception rolls back.
Who:   Created by `build_store()` during application startup.

Fault Translation:
    SQLAlchemy and socket errors never leave this module raw. They are logged
    with the collection and operation, then re-raised as DatabaseError so the
    global handler answers 500. A missing document is NOT a fault: updates
    return UpdateResult(matched=False), deletes return deleted_count=0.
"""

import logging
import uuid
from typing import Any, List, Optional, Type

from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from restaurant_api.config import Settings
from restaurant_api.database import Base, build_engine, build_session_factory
from restaurant_api.exceptions import DatabaseError
from restaurant_api.models.document import DocumentMixin, MenuDocument, OrderDocument
from restaurant_api.services.store_base import (
    DeleteResult,
    Document,
    DocumentCollection,
    DocumentStore,
    InsertResult,
    UpdateResult,
    ensure_no_identifier,
)

logger = logging.getLogger(__name__)

# Driver-level failures worth translating into DatabaseError
STORE_FAULTS = (SQLAlchemyError, OSError)


def _store_fault(collection: str, operation: str, exc: Exception) -> DatabaseError:
    logger.error(
        "Store operation %s on %s failed: %s: %s",
        operation, collection, type(exc).__name__, exc,
    )
    return DatabaseError(
        message=f"{collection}: could not {operation} ({type(exc).__name__})",
        context={
            "collection": collection,
            "operation": operation,
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )


class SqlCollection(DocumentCollection):
    """A collection mapped onto one document table."""

    def __init__(
        self,
        name: str,
        model: Type[DocumentMixin],
        session_factory: async_sessionmaker[AsyncSession],
    ):
        self.name = name
        self.model = model
        self._session_factory = session_factory

    async def list_all(self) -> List[Document]:
        query = select(self.model).order_by(self.model.created_at, self.model.id)
        try:
            async with self._session_factory() as session:
                result = await session.execute(query)
                return [row.to_document() for row in result.scalars().all()]
        except STORE_FAULTS as e:
            raise _store_fault(self.name, "list documents", e) from e

    async def insert(self, doc: Document) -> InsertResult:
        ensure_no_identifier(doc)
        row = self.model(id=uuid.uuid4(), body=dict(doc))
        try:
            async with self._session_factory.begin() as session:
                session.add(row)
        except STORE_FAULTS as e:
            raise _store_fault(self.name, "insert document", e) from e

        logger.info("Inserted document %s into %s", row.id, self.name)
        return InsertResult(inserted_id=str(row.id))

    async def find_one_and_set_field(
        self, doc_id: uuid.UUID, field: str, value: Any
    ) -> UpdateResult:
        # FOR UPDATE keeps concurrent writers from losing each other's
        # fields in the read-modify-write of the JSON body (no-op on SQLite)
        query = select(self.model).where(self.model.id == doc_id).with_for_update()
        try:
            async with self._session_factory.begin() as session:
                row = (await session.execute(query)).scalar_one_or_none()
                if row is None:
                    return UpdateResult(matched=False)
                # Assign a new dict so the JSON column is flagged dirty
                row.body = {**row.body, field: value}
                await session.flush()
                document = row.to_document()
        except STORE_FAULTS as e:
            raise _store_fault(self.name, "update document", e) from e

        logger.info("Set %s on %s document %s", field, self.name, doc_id)
        return UpdateResult(matched=True, document=document)

    async def delete_one(self, doc_id: uuid.UUID) -> DeleteResult:
        statement = delete(self.model).where(self.model.id == doc_id)
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(statement)
        except STORE_FAULTS as e:
            raise _store_fault(self.name, "delete document", e) from e

        deleted = result.rowcount or 0
        logger.info("Deleted %d document(s) with id %s from %s", deleted, doc_id, self.name)
        return DeleteResult(deleted_count=deleted)


class SqlDocumentStore(DocumentStore):
    """
    The `menu` and `orders` collections on one async engine.

    Usage:
        store = SqlDocumentStore.from_settings(settings)
        await store.create_tables()   # optional, Alembic otherwise
        await store.ping()
        ...
        await store.close()
    """

    backend = "sql"

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        session_factory = build_session_factory(engine)
        self.menu = SqlCollection("menu", MenuDocument, session_factory)
        self.orders = SqlCollection("orders", OrderDocument, session_factory)

    @classmethod
    def from_settings(cls, settings: Settings, url: Optional[str] = None) -> "SqlDocumentStore":
        return cls(build_engine(settings, url=url))

    async def create_tables(self) -> None:
        """Create missing document tables (idempotent)."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except STORE_FAULTS as e:
            raise _store_fault("database", "create tables", e) from e

    async def ping(self) -> None:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except STORE_FAULTS as e:
            raise _store_fault("database", "connect", e) from e

    async def close(self) -> None:
        await self.engine.dispose()

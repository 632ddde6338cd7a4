"""
NYB Restaurant Backend — Document Table Models
================================================

What:  ORM models for the two collections, `menu` and `orders`.
How:   Each row holds one schemaless document: a store-generated UUID
       primary key, the caller-supplied fields as a JSON body, and the
       insertion timestamp that defines the collection's natural order.
Who:   Used by SqlDocumentStore and by Alembic for schema management.

Table Design:
    - id: UUID generated in Python at insert time, never reused
    - body: JSON (JSONB on PostgreSQL); the identifier is NOT stored inside
      the body, it is merged back in as `_id` when the document is read
    - created_at: UTC timestamp, indexed for ordered listing
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, DateTime, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from restaurant_api.database import Base

# JSONB where available; plain JSON text elsewhere (SQLite in tests)
DocumentBody = JSON().with_variant(JSONB(), "postgresql")


class DocumentMixin:
    """Columns shared by every document table."""

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Store-generated document identifier",
    )

    body: Mapped[Dict[str, Any]] = mapped_column(
        DocumentBody,
        nullable=False,
        default=dict,
        comment="Caller-supplied document fields",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
        comment="When the document was inserted (UTC)",
    )

    def to_document(self) -> Dict[str, Any]:
        """Body fields plus the identifier under `_id`."""
        return {"_id": str(self.id), **self.body}

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"


class MenuDocument(DocumentMixin, Base):
    """A menu item document."""

    __tablename__ = "menu"


class OrderDocument(DocumentMixin, Base):
    """An order document."""

    __tablename__ = "orders"

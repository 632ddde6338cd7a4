"""
NYB Restaurant Backend — Document Store Gateway Interface
===========================================================

What:  Abstract contract between the resource services and persistence.
How:   A DocumentStore exposes two DocumentCollection objects (`menu`,
       `orders`). Concrete stores: SqlDocumentStore (default) and
       InMemoryDocumentStore (tests, local runs).
Who:   Called by MenuService / OrderService; created by the app lifespan.

Result types:
    Every write returns a small result object instead of a driver-specific
    wrapper. In particular `UpdateResult.matched` is the one signal that
    says whether a document with the requested identifier existed; callers
    must check it rather than the truthiness of `document`.
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from restaurant_api.exceptions import ValidationError

Document = Dict[str, Any]

# Keys a caller may not set: the store owns the identifier
RESERVED_KEYS = ("_id", "id")


@dataclass(frozen=True)
class InsertResult:
    inserted_id: str


@dataclass(frozen=True)
class UpdateResult:
    matched: bool
    document: Optional[Document] = None


@dataclass(frozen=True)
class DeleteResult:
    deleted_count: int


def parse_document_id(raw: str, resource: str = "document") -> uuid.UUID:
    """
    Convert a path parameter into the store identifier type.

    Raises:
        ValidationError: `raw` is not a UUID. Raised before any store call
            so a malformed id is a client error, never a storage fault.
    """
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError):
        raise ValidationError(
            message=f"Invalid {resource} id '{raw}'",
            field="id",
        )


def ensure_no_identifier(doc: Document) -> None:
    """Reject documents that already carry an identifier."""
    present = [key for key in RESERVED_KEYS if key in doc]
    if present:
        raise ValidationError(
            message="Document must not include an identifier; one is assigned on insert",
            field=present[0],
        )


class DocumentCollection(ABC):
    """
    One named collection of schemaless documents.

    Documents handed out are plain dicts with the identifier rendered as a
    string under `_id`. Mutating a returned dict never changes the store.
    """

    name: str

    @abstractmethod
    async def list_all(self) -> List[Document]:
        """Every stored document, in insertion order. No paging, no filters."""
        ...

    @abstractmethod
    async def insert(self, doc: Document) -> InsertResult:
        """
        Store `doc` under a newly generated identifier.

        Raises:
            ValidationError: `doc` carries `_id` or `id`.
            DatabaseError: The backend rejected the write.
        """
        ...

    @abstractmethod
    async def find_one_and_set_field(
        self, doc_id: uuid.UUID, field: str, value: Any
    ) -> UpdateResult:
        """
        Set exactly `field` to `value` on the document with `doc_id`.

        Returns:
            UpdateResult(matched=True, document=<post-update document>), or
            UpdateResult(matched=False) when no document has that id.
            A missing document is never an exception.
        """
        ...

    @abstractmethod
    async def delete_one(self, doc_id: uuid.UUID) -> DeleteResult:
        """Remove the document if present; deleted_count is 1 or 0."""
        ...


class DocumentStore(ABC):
    """The two collections plus connection lifecycle."""

    backend: str
    menu: DocumentCollection
    orders: DocumentCollection

    @abstractmethod
    async def ping(self) -> None:
        """
        Verify the backend is reachable.

        Raises:
            DatabaseError: The backend could not be reached.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release connections. Called on application shutdown."""
        ...

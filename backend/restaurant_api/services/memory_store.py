"""
NYB Restaurant Backend — In-Memory Document Store
===================================================

What:  DocumentStore kept entirely in process memory.
Who:   The test suite (substituted into the app factory) and local runs with
       STORE_BACKEND=memory. Data is lost on restart.
How:   One insertion-ordered dict per collection; documents are deep-copied
       on the way in and on the way out.
"""

import copy
import logging
import uuid
from typing import Any, Dict, List

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


class InMemoryCollection(DocumentCollection):

    def __init__(self, name: str):
        self.name = name
        self._docs: Dict[uuid.UUID, Document] = {}

    async def list_all(self) -> List[Document]:
        return [self._render(doc_id, body) for doc_id, body in self._docs.items()]

    async def insert(self, doc: Document) -> InsertResult:
        ensure_no_identifier(doc)
        doc_id = uuid.uuid4()
        while doc_id in self._docs:
            doc_id = uuid.uuid4()
        self._docs[doc_id] = copy.deepcopy(doc)
        logger.debug("Inserted %s into %s", doc_id, self.name)
        return InsertResult(inserted_id=str(doc_id))

    async def find_one_and_set_field(
        self, doc_id: uuid.UUID, field: str, value: Any
    ) -> UpdateResult:
        body = self._docs.get(doc_id)
        if body is None:
            return UpdateResult(matched=False)
        body[field] = copy.deepcopy(value)
        return UpdateResult(matched=True, document=self._render(doc_id, body))

    async def delete_one(self, doc_id: uuid.UUID) -> DeleteResult:
        removed = self._docs.pop(doc_id, None)
        return DeleteResult(deleted_count=0 if removed is None else 1)

    @staticmethod
    def _render(doc_id: uuid.UUID, body: Document) -> Document:
        return {"_id": str(doc_id), **copy.deepcopy(body)}


class InMemoryDocumentStore(DocumentStore):
    """Both collections in memory. ping() always succeeds."""

    backend = "memory"

    def __init__(self):
        self.menu = InMemoryCollection("menu")
        self.orders = InMemoryCollection("orders")

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        return None

"""
NYB Restaurant Backend — Menu Service
=======================================

What:  Business logic for the menu collection: list, add, toggle
       availability, delete.
How:   Each method parses identifiers first, performs exactly one gateway
       call and maps the result onto a response schema.
Who:   Called by the menu route handlers with the request's DocumentStore.

MenuService is stateless; the store is passed in on every call, so tests
hand it an InMemoryDocumentStore and production hands it the SQL store.
"""

import logging
from typing import Any, List

from restaurant_api.exceptions import NotFoundError
from restaurant_api.schemas.common import DeleteAcknowledgment, InsertAcknowledgment
from restaurant_api.schemas.menu import MenuItem, MenuItemCreate, MenuItemUpdateResponse
from restaurant_api.services.store_base import DocumentStore, parse_document_id

logger = logging.getLogger(__name__)

AVAILABILITY_FIELD = "isAvailable"


class MenuService:

    async def list_items(self, store: DocumentStore) -> List[MenuItem]:
        docs = await store.menu.list_all()
        return [MenuItem.model_validate(doc) for doc in docs]

    async def add_item(self, store: DocumentStore, item: MenuItemCreate) -> InsertAcknowledgment:
        result = await store.menu.insert(item.to_document())
        logger.info("Menu item added: %s", result.inserted_id)
        return InsertAcknowledgment(acknowledged=True, inserted_id=result.inserted_id)

    async def set_availability(
        self, store: DocumentStore, item_id: str, is_available: Any
    ) -> MenuItemUpdateResponse:
        """
        Set `isAvailable` on one menu item, leaving every other field alone.

        Raises:
            ValidationError: item_id is not a valid identifier (no store call made)
            NotFoundError: no menu item has that identifier
        """
        doc_id = parse_document_id(item_id, resource="item")
        result = await store.menu.find_one_and_set_field(doc_id, AVAILABILITY_FIELD, is_available)
        if not result.matched:
            raise NotFoundError(resource="item", resource_id=item_id)

        return MenuItemUpdateResponse(
            success=True,
            message="Item status updated successfully",
            data=MenuItem.model_validate(result.document),
        )

    async def delete_item(self, store: DocumentStore, item_id: str) -> DeleteAcknowledgment:
        doc_id = parse_document_id(item_id, resource="item")
        result = await store.menu.delete_one(doc_id)
        if result.deleted_count == 0:
            logger.info("Delete requested for absent menu item %s", item_id)
        return DeleteAcknowledgment(acknowledged=True, deleted_count=result.deleted_count)


# ── Singleton Instance ────────────────────────────────────────────────────
menu_service = MenuService()

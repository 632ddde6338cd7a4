"""
NYB Restaurant Backend — Menu Route Handlers
==============================================

What:  GET /menu, POST /addMenuItem, PATCH /items/{itemId}, DELETE /menu/{id}.
How:   Extract path/body parameters, delegate to MenuService, return JSON.
Who:   Called by the restaurant frontend (menu page and admin dashboard).

Paths keep the frontend's existing URLs, so they are not grouped under a
common prefix.

Error responses (handled by global exception handlers):
    HTTP 400: malformed identifier or body (ValidationError / request validation)
    HTTP 404: PATCH for an unknown item (NotFoundError)
    HTTP 500: store failure (DatabaseError)
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends

from restaurant_api.dependencies import get_store
from restaurant_api.schemas.common import (
    DeleteAcknowledgment,
    ErrorResponse,
    InsertAcknowledgment,
)
from restaurant_api.schemas.menu import (
    AvailabilityUpdate,
    MenuItem,
    MenuItemCreate,
    MenuItemUpdateResponse,
)
from restaurant_api.services.menu_service import menu_service
from restaurant_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Menu"])


@router.get(
    "/menu",
    response_model=List[MenuItem],
    response_model_exclude_unset=True,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List every menu item",
)
async def list_menu(store: DocumentStore = Depends(get_store)) -> List[MenuItem]:
    return await menu_service.list_items(store)


@router.post(
    "/addMenuItem",
    response_model=InsertAcknowledgment,
    responses={
        400: {"description": "Malformed menu item", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Add a menu item",
    description=(
        "Stores the item as sent (name and price required, any extra fields kept) "
        "and returns the assigned identifier."
    ),
)
async def add_menu_item(
    item: MenuItemCreate = Body(...),
    store: DocumentStore = Depends(get_store),
) -> InsertAcknowledgment:
    return await menu_service.add_item(store, item)


@router.patch(
    "/items/{item_id}",
    response_model=MenuItemUpdateResponse,
    response_model_exclude_unset=True,
    responses={
        400: {"description": "Malformed identifier or body", "model": ErrorResponse},
        404: {"description": "Item not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Set a menu item's availability",
)
async def update_item_availability(
    item_id: str,
    update: AvailabilityUpdate = Body(...),
    store: DocumentStore = Depends(get_store),
) -> MenuItemUpdateResponse:
    """
    Only `isAvailable` changes; the value is stored as given.

    Args:
        item_id: Identifier path parameter. Validated by the service layer so
                 a malformed value produces 400 rather than FastAPI's 422.
    """
    return await menu_service.set_availability(store, item_id, update.is_available)


@router.delete(
    "/menu/{item_id}",
    response_model=DeleteAcknowledgment,
    responses={
        400: {"description": "Malformed identifier", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Delete a menu item",
    description="Returns deletedCount 1 when the item existed, 0 otherwise.",
)
async def delete_menu_item(
    item_id: str,
    store: DocumentStore = Depends(get_store),
) -> DeleteAcknowledgment:
    return await menu_service.delete_item(store, item_id)

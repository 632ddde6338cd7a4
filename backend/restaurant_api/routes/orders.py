"""
NYB Restaurant Backend — Order Route Handlers
===============================================

What:  GET /orders, POST /orders, PATCH /orders/{orderId}.
Who:   Called by the checkout page (create) and the kitchen dashboard
       (list, status changes).
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends

from restaurant_api.dependencies import get_store
from restaurant_api.schemas.common import ErrorResponse, InsertAcknowledgment
from restaurant_api.schemas.order import (
    Order,
    OrderCreate,
    OrderUpdateResponse,
    StatusUpdate,
)
from restaurant_api.services.order_service import order_service
from restaurant_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get(
    "",
    response_model=List[Order],
    response_model_exclude_unset=True,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List every order",
)
async def list_orders(store: DocumentStore = Depends(get_store)) -> List[Order]:
    return await order_service.list_orders(store)


@router.post(
    "",
    response_model=InsertAcknowledgment,
    responses={
        400: {"description": "Malformed order", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Place an order",
)
async def create_order(
    order: OrderCreate = Body(...),
    store: DocumentStore = Depends(get_store),
) -> InsertAcknowledgment:
    return await order_service.create_order(store, order)


@router.patch(
    "/{order_id}",
    response_model=OrderUpdateResponse,
    response_model_exclude_unset=True,
    responses={
        400: {"description": "Malformed identifier or body", "model": ErrorResponse},
        404: {"description": "Order not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Change an order's status",
)
async def update_order_status(
    order_id: str,
    update: StatusUpdate = Body(...),
    store: DocumentStore = Depends(get_store),
) -> OrderUpdateResponse:
    return await order_service.update_status(store, order_id, update.status)

"""
NYB Restaurant Backend — Order Service
========================================

What:  Business logic for the orders collection: list, create, update status.
Who:   Called by the order route handlers with the request's DocumentStore.

Orders are never deleted through the API. Status values are open-ended and
stored exactly as received.
"""

import logging
from typing import Any, List

from restaurant_api.exceptions import NotFoundError
from restaurant_api.schemas.common import InsertAcknowledgment
from restaurant_api.schemas.order import Order, OrderCreate, OrderUpdateResponse
from restaurant_api.services.store_base import DocumentStore, parse_document_id

logger = logging.getLogger(__name__)

STATUS_FIELD = "status"


class OrderService:
    """
    Stateless order operations.

    Not-found handling:
        update_status() checks UpdateResult.matched from the gateway. The
        returned document is only read after a confirmed match.
    """

    async def list_orders(self, store: DocumentStore) -> List[Order]:
        docs = await store.orders.list_all()
        return [Order.model_validate(doc) for doc in docs]

    async def create_order(self, store: DocumentStore, order: OrderCreate) -> InsertAcknowledgment:
        result = await store.orders.insert(order.to_document())
        logger.info("Order created: %s", result.inserted_id)
        return InsertAcknowledgment(acknowledged=True, inserted_id=result.inserted_id)

    async def update_status(
        self, store: DocumentStore, order_id: str, status: Any
    ) -> OrderUpdateResponse:
        """
        Set `status` on one order.

        Raises:
            ValidationError: order_id is not a valid identifier (no store call made)
            NotFoundError: no order has that identifier
        """
        doc_id = parse_document_id(order_id, resource="order")
        result = await store.orders.find_one_and_set_field(doc_id, STATUS_FIELD, status)
        if not result.matched:
            raise NotFoundError(resource="order", resource_id=order_id)

        logger.info("Order %s status set to %r", order_id, status)
        return OrderUpdateResponse(
            success=True,
            message="Order status updated successfully",
            data=Order.model_validate(result.document),
        )


# ── Singleton Instance ────────────────────────────────────────────────────
order_service = OrderService()

"""
NYB Restaurant Backend — Order Schemas
========================================

What:  Request and response contracts for the orders collection.
How:   `status` is the only named field; items, quantities and customer
       details ride along as extras. The status vocabulary ("pending",
       "completed", ...) belongs to the frontend and is not enumerated here.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, StrictStr, model_validator

from restaurant_api.schemas.menu import reject_identifier


class OrderCreate(BaseModel):
    """Body of POST /orders."""
    status: Optional[StrictStr] = Field(default=None, description="Initial order state, e.g. 'pending'")

    model_config = {"extra": "allow"}

    @model_validator(mode="before")
    @classmethod
    def check_no_identifier(cls, data: Any) -> Any:
        return reject_identifier(data)

    def to_document(self) -> Dict[str, Any]:
        """Exactly the keys the caller sent."""
        return self.model_dump(exclude_unset=True)


class Order(BaseModel):
    """A stored order as returned by GET /orders and PATCH /orders/{id}."""
    id: str = Field(alias="_id", description="Store-assigned identifier")
    status: Any = None

    model_config = {"extra": "allow"}


class StatusUpdate(BaseModel):
    """Body of PATCH /orders/{orderId}. The value is stored as given."""
    status: Any


class OrderUpdateResponse(BaseModel):
    success: bool = True
    message: str
    data: Order

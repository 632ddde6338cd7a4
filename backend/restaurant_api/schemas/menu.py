"""
NYB Restaurant Backend — Menu Item Schemas
============================================

What:  Request and response contracts for the menu collection.
How:   A handful of typed core fields plus `extra="allow"` so callers can
       attach any descriptive fields (image URL, description, spice level...)
       without a schema change.

Create vs. read:
    MenuItemCreate enforces the implicit shape of a new item (name and price
    present, typed core fields). MenuItem describes what comes back from the
    store and stays permissive: `isAvailable` is whatever the last update
    wrote, since update values are passed through untouched.

Documents are stored as sent. Core fields use strict types, so a value of
the wrong type is rejected (400) instead of being coerced, and only the
JSON key names (`isAvailable`) bind to fields. Any other key, including
`is_available`, is kept verbatim as an extra.
"""

from typing import Any, Dict, Optional, Union

from pydantic import (
    BaseModel,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)

from restaurant_api.services.store_base import RESERVED_KEYS

# Integers stay integers; bools are not prices
Price = Union[StrictInt, StrictFloat]


def reject_identifier(data: Any) -> Any:
    """Before-validator shared by the create schemas."""
    if isinstance(data, dict):
        present = [key for key in RESERVED_KEYS if key in data]
        if present:
            raise ValueError(
                f"'{present[0]}' must not be supplied; the identifier is assigned on insert"
            )
    return data


class MenuItemCreate(BaseModel):
    """Body of POST /addMenuItem."""
    name: StrictStr = Field(min_length=1, description="Display name of the dish")
    price: Price = Field(description="Unit price")
    category: Optional[StrictStr] = Field(default=None, description="Menu section, e.g. 'burgers'")
    is_available: Optional[StrictBool] = Field(
        default=None,
        alias="isAvailable",
        description="Whether the kitchen can currently serve the item",
    )

    model_config = {"extra": "allow"}

    @model_validator(mode="before")
    @classmethod
    def check_no_identifier(cls, data: Any) -> Any:
        return reject_identifier(data)

    def to_document(self) -> Dict[str, Any]:
        """Exactly the keys the caller sent, extras included, under their JSON names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class MenuItem(BaseModel):
    """A stored menu item as returned by GET /menu and PATCH /items/{id}."""
    id: str = Field(alias="_id", description="Store-assigned identifier")
    name: Optional[StrictStr] = None
    price: Optional[Price] = None
    category: Optional[StrictStr] = None
    is_available: Any = Field(default=None, alias="isAvailable")

    model_config = {"extra": "allow"}


class AvailabilityUpdate(BaseModel):
    """Body of PATCH /items/{itemId}. The value is stored as given."""
    is_available: Any = Field(alias="isAvailable")


class MenuItemUpdateResponse(BaseModel):
    success: bool = True
    message: str
    data: MenuItem

"""
NYB Restaurant Backend — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for the three failure classes the API
       exposes.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the store gateway and the resource services.

Exception Hierarchy:
    RestaurantError (base)
    ├── ValidationError   → 400 Bad Request (malformed id or body)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class RestaurantError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RestaurantError):
    """
    Raised when client input cannot be used as given.

    When:    Identifier is not a valid UUID, body carries its own identifier.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(RestaurantError):
    """
    Raised when an operation references an identifier with no document.

    When:    PATCH /orders/{id} or PATCH /items/{id} for an unknown id.
    HTTP:    404 Not Found

    The gateway reports a miss through UpdateResult.matched; the services
    turn that flag into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(RestaurantError):
    """
    Raised when the persistence layer fails or is unreachable.

    HTTP:    500 Internal Server Error

    The message names the failed operation and is returned to the client;
    the driver error type and text stay in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

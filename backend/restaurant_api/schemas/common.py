"""
NYB Restaurant Backend — Shared Response Schemas
==================================================

What:  Acknowledgment, error and health payloads shared by all routes.
How:   Field names follow the JSON keys the frontend already reads
       (`insertedId`, `deletedCount`, `success`), exposed through aliases so
       Python code keeps snake_case attribute names.
"""

from typing import Optional

from pydantic import BaseModel, Field


class InsertAcknowledgment(BaseModel):
    """
    Returned by POST /orders and POST /addMenuItem.

    Example:
        {"acknowledged": true, "insertedId": "0c6f9a52-2d3e-4a5b-9d3c-7a1e0f4b8c21"}
    """
    acknowledged: bool = Field(default=True, description="Write accepted by the store")
    inserted_id: str = Field(alias="insertedId", description="Identifier assigned to the new document")

    model_config = {"populate_by_name": True}


class DeleteAcknowledgment(BaseModel):
    """
    Returned by DELETE /menu/{id}. A deletedCount of 0 means nothing
    matched the identifier; deleting twice is not an error.
    """
    acknowledged: bool = Field(default=True)
    deleted_count: int = Field(alias="deletedCount", ge=0, description="Documents removed (0 or 1)")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """
    Standardized error body for every non-2xx response.

    Example:
        {
            "success": false,
            "error": "not_found",
            "message": "Order not found",
            "request_id": "a1b2c3d4"
        }
    """
    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store_backend: str = Field(description="Configured document store: sql, memory")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

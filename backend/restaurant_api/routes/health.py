"""
NYB Restaurant Backend — Liveness & Health Routes
===================================================

What:  GET / (plain-text liveness) and GET /health (store connectivity).
Who:   Browsers and uptime checks hit `/`; Docker health checks and load
       balancers use `/health`.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from restaurant_api import __version__
from restaurant_api.dependencies import get_store
from restaurant_api.exceptions import DatabaseError
from restaurant_api.schemas.common import HealthResponse
from restaurant_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

LIVENESS_TEXT = "NYB Restaurant server is running..."

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Liveness probe")
async def root() -> str:
    return LIVENESS_TEXT


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: DocumentStore = Depends(get_store),
) -> HealthResponse:
    """
    Probe the document store with its lightweight ping.

    For the SQL store this is `SELECT 1`; the in-memory store always answers.
    """
    database = "connected"
    overall = "healthy"
    try:
        await store.ping()
    except DatabaseError as e:
        database = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: store unreachable: %s", e.message)

    return HealthResponse(
        status=overall,
        version=__version__,
        store_backend=store.backend,
        database=database,
        uptime_seconds=round(time.time() - _start_time, 2),
    )

"""
NYB Restaurant Backend — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn restaurant_api.main:app` or the `nyb-server` script).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Logging → GZip → CORS     │
    │                                                     │
    │  Routes:                                            │
    │  GET /menu  POST /addMenuItem  PATCH /items/{id}    │
    │  DELETE /menu/{id}  GET|POST /orders                │
    │  PATCH /orders/{id}  GET /  GET /health             │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ Database/other→500 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the document store and ping it (unless one was injected);
       an unreachable store is logged and aborts startup
    Shutdown:
    1. Close the store the lifespan opened
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from restaurant_api import __version__
from restaurant_api.config import Settings, settings
from restaurant_api.dependencies import build_store
from restaurant_api.exceptions import (
    DatabaseError,
    NotFoundError,
    RestaurantError,
    ValidationError,
)
from restaurant_api.middleware.logging import RequestLoggingMiddleware
from restaurant_api.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from restaurant_api.routes import health, menu, orders
from restaurant_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PATCH", "DELETE"]


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = settings.log_level) -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (container log collectors read it)
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the document store on startup and close it on shutdown.

    A store injected through create_app(store=...) is used as-is and left
    open; its owner closes it.
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("NYB Restaurant backend %s starting up...", __version__)

    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        try:
            app.state.store = await build_store(app_settings)
        except RestaurantError as e:
            logger.critical("Cannot start without a document store: %s | Context: %s", e.message, e.context)
            raise
        except Exception:
            logger.critical("Cannot start without a document store", exc_info=True)
            raise

    logger.info("Document store ready (%s)", app.state.store.backend)
    logger.info(
        "NYB Restaurant server listening on %s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )

    yield

    logger.info("NYB Restaurant backend shutting down...")
    if owns_store:
        await app.state.store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    """
    Build the shared error body.

    The request ID header is set here as well: the catch-all handler runs in
    ServerErrorMiddleware, outside RequestIDMiddleware, so nothing else would
    add it to those responses.
    """
    rid = request_id_var.get("")
    content = {
        "success": False,
        "error": error,
        "message": message,
        "request_id": rid,
    }
    if details:
        content["details"] = details
    headers = {REQUEST_ID_HEADER: rid} if rid else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every fault onto one of the three error shapes.

        ValidationError / RequestValidationError → 400
        NotFoundError                           → 404
        DatabaseError / RestaurantError         → 500
        Exception (fallback)                    → 500
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Body is not a JSON object, lacks a required key, or has a bad type."""
        errors = [
            {
                "loc": list(err.get("loc", ())),
                "msg": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.warning("[%s] Malformed request to %s: %s", request_id_var.get(""), request.url.path, errors)
        return _error_response(400, "validation_error", "Malformed request body", {"errors": errors})

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, exc.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        # Driver details stay in the log
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "internal_server_error", "Internal server error", {"reason": exc.message})

    @app.exception_handler(RestaurantError)
    async def handle_app_error(request: Request, exc: RestaurantError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "internal_server_error", "Internal server error", {"reason": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True)
        return _error_response(500, "internal_server_error", "Internal server error", {"reason": str(exc)})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    store: Optional[DocumentStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store:        Pre-built document store (tests pass InMemoryDocumentStore).
                      When omitted the lifespan builds one from settings.
        app_settings: Settings override; defaults to the module singleton.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="NYB Restaurant API",
        description="Menu and order management for the NYB Restaurant frontend.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: the last added
    # (RequestID) sees the request first.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(menu.router)
    app.include_router(orders.router)

    return app


# uvicorn expects `restaurant_api.main:app` to be importable
app = create_app()


def run() -> None:
    """Console entry point: serve on all interfaces at the configured port."""
    setup_logging(settings.log_level)
    uvicorn.run(
        "restaurant_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

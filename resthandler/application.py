"""
resthandler: FastAPI Application Factory
========================================

What:  Builds the FastAPI application serving a set of resource handlers.
How:   create_app() wires middleware, exception handlers, the health route,
       and one generated router per handler.
Who:   Called by API.app; uvicorn then serves the returned instance.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS           │
    │                                                     │
    │  Routes:      /health                               │
    │               {prefix}/{version}/<name>[/{id}]      │
    │               (one router per registered handler)   │
    │                                                     │
    │  Exception Handlers:                                │
    │   Validation→400  Unauthorized→401  NotFound→404    │
    │   MethodNotAllowed→405  other→500                   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Iterable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resthandler import __version__
from resthandler.config import Settings, settings
from resthandler.exceptions import (
    MethodNotAllowedError,
    NotFoundError,
    ResourceError,
    UnauthorizedError,
    ValidationError,
)
from resthandler.handlers.base import ResourceHandler
from resthandler.middleware.logging import RequestLoggingMiddleware
from resthandler.middleware.request_id import RequestIDMiddleware, request_id_var
from resthandler.responses import error_response, unexpected_error_response
from resthandler.routes import health
from resthandler.routes.resources import build_resource_router

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(config: Settings = settings) -> None:
    """
    Configure process-wide logging.

    Format: 2024-01-15T12:00:00 [INFO] resthandler.access: GET /api/v1/foo 200 ...
    When:   Called once from the lifespan handler, before anything is logged.
    """
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: configure logging and report what is served. Shutdown: log it."""
    config: Settings = app.state.settings
    setup_logging(config)
    logger.info("=" * 60)
    logger.info("resthandler %s starting up...", __version__)
    for name in app.state.resource_names:
        logger.info("Serving resource '%s' at %s/{version}/%s", name, config.api_prefix, name)
    logger.info("API docs: http://%s:%d/docs", config.backend_host, config.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("resthandler shutting down...")
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(exc: ResourceError, rid: str, include_details: bool = True) -> JSONResponse:
    return error_response(
        status_code=exc.status_code,
        error=exc.error_code,
        message=exc.message,
        request_id=rid,
        details=exc.context if include_details else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map the ResourceError hierarchy to HTTP responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        UnauthorizedError       → 401 Unauthorized
        NotFoundError           → 404 Not Found
        MethodNotAllowedError   → 405 Method Not Allowed
        ResourceError (base)    → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Responses never contain stack traces; those are logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return _error_response(exc, rid)

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        rid = request_id_var.get("")
        logger.warning("[%s] Unauthorized %s %s", rid, request.method, request.url.path)
        return _error_response(exc, rid, include_details=False)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(exc, request_id_var.get(""))

    @app.exception_handler(MethodNotAllowedError)
    async def handle_method_not_allowed(request: Request, exc: MethodNotAllowedError):
        return _error_response(exc, request_id_var.get(""))

    @app.exception_handler(ResourceError)
    async def handle_resource_error(request: Request, exc: ResourceError):
        rid = request_id_var.get("")
        logger.error("[%s] Resource error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(exc, rid, include_details=False)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs in ServerErrorMiddleware, after RequestIDMiddleware reset the ContextVar
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return unexpected_error_response(rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    handlers: Iterable[ResourceHandler] = (),
    config: Settings = settings,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        handlers: Resource handlers to serve, in registration order. Names
                  are assumed unique (API.register_resource_handler checks).
        config:   Settings for routing, pagination bounds and CORS.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    handlers = list(handlers)

    app = FastAPI(
        title="resthandler API",
        description="CRUD endpoints generated from registered resource handlers.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.resource_names = [h.resource_name() for h in handlers]

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    for handler in handlers:
        app.include_router(build_resource_router(handler, config))

    return app

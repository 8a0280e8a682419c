"""FastAPI application factory.

The Store is created by the caller (CLI ``serve`` or a test fixture) and
attached to ``app.state``; routers reach it through :func:`deps.get_store`.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError

from storefront import __version__
from storefront.api.errors import validation_exception_handler
from storefront.api.routers import carts, customers, products

if TYPE_CHECKING:
    from storefront.infrastructure.store import Store

logger = logging.getLogger(__name__)
log = structlog.get_logger("storefront.api")


def create_app(store: Store) -> FastAPI:
    """Create the storefront JSON API bound to *store*."""
    app = FastAPI(title="storefront", version=__version__)
    app.state.store = store

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.middleware("http")
    async def bind_request_context(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Tag every log line of a request with its id, method, and path."""
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request.headers.get("x-request-id") or uuid.uuid4().hex[:12],
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()
        response = await call_next(request)
        log.debug(
            "request.complete",
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(customers.router)
    app.include_router(products.router)
    app.include_router(carts.router)

    logger.debug("API created for %s", store.settings.database_url)
    return app

# bookserver/main.py
"""
FastAPI application factory for the book server.

Run with: uvicorn bookserver.main:create_app --factory --port 8080
or:       bookserver start --port 8080
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import timedelta
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from . import __version__
from .auth import auth_router
from .auth.deps import require_session
from .auth.store import CredentialStore
from .auth.tokens import TokenIssuer, TokenValidator
from .catalog import catalog_router, catalog_write_router
from .catalog.store import BookStore
from .config import Settings, load_settings
from .errors import BookServerError
from .seed import seed_demo_data

logger = logging.getLogger(__name__)


async def book_server_error_handler(request: Request, exc: BookServerError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = f"{where}: {first.get('msg')}" if where else str(first.get("msg"))
    else:
        detail = "malformed request"
    return PlainTextResponse(f"Invalid request: {detail}", status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception):
    return PlainTextResponse("Internal server error", status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    credential_store: Optional[CredentialStore] = None,
    book_store: Optional[BookStore] = None,
) -> FastAPI:
    """Build the application.

    Stores default to fresh empty instances; pass your own to share
    state between apps or to pre-populate them in tests.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="Book Server API",
        description="A RESTful API server to store and show book information.",
        version=__version__,
    )

    app.state.settings = settings
    app.state.credential_store = credential_store if credential_store is not None else CredentialStore()
    app.state.book_store = book_store if book_store is not None else BookStore()
    app.state.token_issuer = TokenIssuer(
        secret=settings.jwt_secret,
        audience=settings.jwt_audience,
        ttl=timedelta(minutes=settings.token_ttl_minutes),
    )
    app.state.token_validator = TokenValidator(
        secret=settings.jwt_secret,
        audience=settings.jwt_audience,
    )

    if settings.seed_demo:
        seed_demo_data(app.state.credential_store, app.state.book_store)

    app.add_exception_handler(BookServerError, book_server_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request_failed request_id=%s path=%s", request_id, request.url.path)
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["x-request-id"] = request_id
        logger.info(
            "%s %s -> %s (%.1f ms) request_id=%s",
            request.method, request.url.path, response.status_code, elapsed_ms, request_id,
        )
        return response

    @app.get("/")
    def health_check():
        return {"status": "ok"}

    write_dependencies = [Depends(require_session)] if settings.require_session else []
    app.include_router(auth_router)
    app.include_router(catalog_router)
    app.include_router(catalog_write_router, dependencies=write_dependencies)

    logger.info(
        "Book server app created (session guard %s)",
        "on" if settings.require_session else "off",
    )
    return app

"""
Centralized fault responder for FastAPI.

Turns raised faults into client-safe JSON responses.
No stack traces or internal details are exposed to clients.
Every error body has the shape {"error": "<message>"}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.domain.catalog.errors import (
    CatalogDomainError,
    InvalidQueryError,
    RouteNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

GENERIC_SERVER_ERROR = "Internal Server Error"


def error_response(
    status_code: int, error: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code, content={"error": error}, headers=headers
    )


def respond_to_fault(request: Request, exc: Exception) -> JSONResponse:
    """Classify a raised fault into a response.

    Route misses and uninterpretable query input keep their message.
    Anything else is logged with its traceback and reported generically.
    """
    if isinstance(exc, RouteNotFoundError):
        logger.warning("No route for %s %s", request.method, exc.path)
        return error_response(HTTP_404, exc.message)
    if isinstance(exc, InvalidQueryError):
        logger.warning("Rejected query on %s: %s", request.url.path, exc.reason)
        return error_response(HTTP_400, exc.message)

    logger.error(
        "Unhandled fault on %s %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return error_response(HTTP_500, GENERIC_SERVER_ERROR)


def validation_message(exc: RequestValidationError) -> str:
    """Flatten pydantic validation errors into one readable line."""
    problems = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part not in ("body", "path")
        )
        message = error.get("msg", "invalid value")
        problems.append(f"{location}: {message}" if location else message)
    return "Validation failed: " + "; ".join(problems)


def register_error_handlers(app: FastAPI) -> None:
    """Register the fault responder on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Route misses, invalid queries and other domain faults."""
        return respond_to_fault(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Rejected request bodies and path parameters."""
        message = validation_message(exc)
        logger.warning("Validation failed on %s %s", request.method, request.url.path)
        return error_response(HTTP_400, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Framework HTTP errors (unmatched paths, wrong methods)."""
        return error_response(
            exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        return respond_to_fault(request, exc)

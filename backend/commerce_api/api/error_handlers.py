"""Error Handlers — global exception handlers for the commerce API.

Invariants:
    - CommerceError → its own http_status with the {"error": str, "code": ...} envelope
    - RequestValidationError → 422 with a field-to-message map (structural errors)
    - Unknown route → 404 {"error": "Not found"}; wrong method → 405
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (CommerceError), validation (Pydantic),
      routing (Starlette HTTPException), catch-all (Exception)
    - "error" is always a human-readable string: clients display it verbatim
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from commerce_api.core.errors import (
    CommerceError, ErrorCategory, RouteNotFoundError, summarize_validation_errors,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_commerce_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_commerce_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(CommerceError)
    async def commerce_error_handler(request: Request, exc: CommerceError):
        """Handle all commerce domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"CommerceError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=422,
            content=build_validation_error_response(exc.errors()),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404, 405, explicit HTTPExceptions)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Map Starlette HTTP errors onto the commerce envelope."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            content = RouteNotFoundError(request.url.path).to_response()
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            content = {
                "error": "Method not allowed",
                "code": "METHOD_NOT_ALLOWED",
                "category": ErrorCategory.RESOURCE_NOT_FOUND.value,
            }
        else:
            content = {"error": str(exc.detail), "code": "HTTP_ERROR"}
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "code": "INTERNAL_ERROR",
                "category": ErrorCategory.INTERNAL.value,
            },
        )


def build_validation_error_response(errors) -> dict:
    """Build the 422 envelope: a readable summary plus a field-to-message map."""
    summary, fields = summarize_validation_errors(errors)
    return {
        "error": summary or "Invalid request data",
        "code": "VALIDATION_ERROR",
        "category": ErrorCategory.VALIDATION.value,
        "fields": fields,
    }

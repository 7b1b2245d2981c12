"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). This is the only place
error kinds become HTTP status codes.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pastebox.core.config import get_settings
from pastebox.domain.enums import ErrorKind
from pastebox.domain.exceptions import PasteException

logger = logging.getLogger(__name__)

_ERROR_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.MISSING_FILE: 400,
    ErrorKind.MISSING_FILE_NAME: 400,
    ErrorKind.MISSING_FILE_CONTENT_TYPE: 400,
    ErrorKind.MISSING_DELETE_KEY: 400,
    ErrorKind.WRONG_DELETE_KEY: 403,
    ErrorKind.INSUFFICIENT_STORAGE: 507,
    ErrorKind.BACKEND_ERROR: 500,
    ErrorKind.CLOCK_SKEW: 500,
}


def status_for_kind(kind: ErrorKind) -> int:
    """Return the HTTP status for an error kind."""
    return _ERROR_KIND_STATUS.get(kind, 500)


def _paste_exception_handler(request: Request, exc: PasteException) -> JSONResponse:
    """Return JSON from PasteException.to_dict(); 5xx details only in debug."""
    status = status_for_kind(exc.kind)
    content = exc.to_dict()
    if status >= 500:
        logger.error(
            "%s %s failed: %s %s", request.method, request.url.path, exc.error_code, exc.details
        )
        if not get_settings().debug:
            content["details"] = {}
    return JSONResponse(status_code=status, content=content)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: PasteException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(PasteException, _paste_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)

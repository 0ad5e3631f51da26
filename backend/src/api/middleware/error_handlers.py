"""Exception handlers rendering every error as {error, message, detail}."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...services.auth import AuthError

logger = logging.getLogger(__name__)

# Error codes for the statuses this API produces
ERROR_CODES: Dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "validation_error",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "internal_error",
}


def error_response(
    status_code: int,
    message: str,
    *,
    error: Optional[str] = None,
    detail: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    code = error or ERROR_CODES.get(status_code, "internal_error")
    return JSONResponse(
        status_code=status_code,
        content={"error": code, "message": message, "detail": detail},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request payload",
        detail={"errors": exc.errors()},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) and exc.detail else "Request failed"
    return error_response(exc.status_code, message)


async def auth_exception_handler(request: Request, exc: AuthError) -> JSONResponse:
    logger.info(
        "Rejected unauthenticated request",
        extra={"error": exc.error, "path": request.url.path},
    )
    return error_response(
        exc.status_code, exc.message, error=exc.error, detail=exc.detail or None
    )


async def internal_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception: %s", exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Attach shared exception handlers to the FastAPI application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(AuthError, auth_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)


__all__ = [
    "register_error_handlers",
    "error_response",
    "validation_exception_handler",
    "http_exception_handler",
    "auth_exception_handler",
    "internal_exception_handler",
]

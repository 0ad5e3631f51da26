"""FastAPI dependencies for session authentication and error handling."""

from .auth_middleware import SessionContext, get_session_context, get_session_service
from .error_handlers import (
    http_exception_handler,
    internal_exception_handler,
    register_error_handlers,
    validation_exception_handler,
)

__all__ = [
    "SessionContext",
    "get_session_context",
    "get_session_service",
    "register_error_handlers",
    "validation_exception_handler",
    "http_exception_handler",
    "internal_exception_handler",
]

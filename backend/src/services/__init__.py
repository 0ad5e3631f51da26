"""Service layer for session handling and tool-call messaging."""

from .auth import AuthError, SessionService, SessionSigner
from .config import AppConfig, get_config, reload_config
from .cookies import CookieStore, ResponseCookieStore
from .tool_messaging import classify_tool_call, get_tool_display_info

__all__ = [
    "AppConfig",
    "get_config",
    "reload_config",
    "AuthError",
    "SessionService",
    "SessionSigner",
    "CookieStore",
    "ResponseCookieStore",
    "classify_tool_call",
    "get_tool_display_info",
]

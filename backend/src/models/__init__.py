"""Pydantic models for data validation and serialization."""

from .auth import CookieOptions, SessionCreateRequest, SessionPayload, SessionResponse
from .tool_messaging import (
    ToolClassification,
    ToolContext,
    ToolDisplayInfo,
    ToolDisplayRequest,
)

__all__ = [
    "SessionPayload",
    "CookieOptions",
    "SessionCreateRequest",
    "SessionResponse",
    "ToolDisplayInfo",
    "ToolContext",
    "ToolClassification",
    "ToolDisplayRequest",
]

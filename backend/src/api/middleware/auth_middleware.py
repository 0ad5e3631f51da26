"""Session cookie dependency helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends, Request, Response

from ...models.auth import SessionPayload
from ...services.auth import SESSION_COOKIE_NAME, AuthError, SessionService
from ...services.cookies import ResponseCookieStore


@lru_cache(maxsize=1)
def get_session_service() -> SessionService:
    """Return the process-wide session service built from the current config."""
    return SessionService()


@dataclass
class SessionContext:
    """Context extracted from the session cookie."""

    user_id: str
    email: str
    payload: SessionPayload


async def get_session_context(
    request: Request,
    response: Response,
    service: SessionService = Depends(get_session_service),
) -> SessionContext:
    """
    Verify the auth-token cookie and return the session it carries.

    Raises AuthError (rendered as 401) if the cookie is missing, expired or invalid.
    """
    cookies = ResponseCookieStore(request, response)
    if not cookies.get(SESSION_COOKIE_NAME):
        raise AuthError("unauthorized", "Session cookie required")

    payload = await service.get_session(cookies)
    if payload is None:
        raise AuthError("invalid_session", "Session is invalid or expired")

    return SessionContext(user_id=payload.user_id, email=payload.email, payload=payload)


__all__ = ["SessionContext", "get_session_context", "get_session_service"]

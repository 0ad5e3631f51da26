"""Session cookie routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ...models.auth import SessionCreateRequest, SessionResponse
from ...services.auth import SessionService
from ...services.cookies import ResponseCookieStore
from ..middleware import SessionContext, get_session_context, get_session_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/auth/session", status_code=status.HTTP_204_NO_CONTENT)
async def create_session(
    body: SessionCreateRequest,
    request: Request,
    response: Response,
    service: SessionService = Depends(get_session_service),
) -> None:
    """Development login: issue a session cookie for the given identity."""
    config = service.config
    if config.is_production or not config.enable_local_mode:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    logger.info("Development login", extra={"user_id": body.user_id})
    await service.create_session(
        body.user_id, body.email, ResponseCookieStore(request, response)
    )


@router.get("/api/auth/session", response_model=SessionResponse)
async def read_session(session: SessionContext = Depends(get_session_context)):
    """Return the session carried by the auth-token cookie."""
    return SessionResponse(
        user_id=session.user_id,
        email=session.email,
        expires_at=session.payload.expires_at,
    )


@router.delete("/api/auth/session", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    request: Request,
    response: Response,
    service: SessionService = Depends(get_session_service),
) -> None:
    """Log out by expiring the auth-token cookie."""
    await service.delete_session(ResponseCookieStore(request, response))


__all__ = ["router"]

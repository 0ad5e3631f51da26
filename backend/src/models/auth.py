"""Session and cookie models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field


class SessionPayload(BaseModel):
    """Claims carried by the session token."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Subject (user id)")
    email: str = Field(..., min_length=1, description="User email address")
    expires_at: datetime = Field(..., description="Session expiration timestamp")

    def to_claims(self, issued_at: datetime) -> Dict[str, Any]:
        """Return the JWT claim set, including registered iat/exp claims."""
        claims = self.model_dump(mode="json")
        claims["iat"] = int(issued_at.timestamp())
        claims["exp"] = int(self.expires_at.timestamp())
        return claims


class CookieOptions(BaseModel):
    """Attributes applied when writing the session cookie."""

    model_config = ConfigDict(frozen=True)

    httponly: bool = Field(True, description="Hide the cookie from client scripts")
    secure: bool = Field(..., description="Send only over HTTPS (production)")
    samesite: Literal["lax"] = Field("lax", description="SameSite policy")
    expires: datetime = Field(..., description="Cookie expiration timestamp")
    path: str = Field("/", description="Cookie path scope")


class SessionCreateRequest(BaseModel):
    """Request body for the development login route."""

    user_id: str = Field(..., min_length=1, max_length=128)
    email: str = Field(..., min_length=1, max_length=320)


class SessionResponse(BaseModel):
    """Current session as returned to the client."""

    user_id: str = Field(..., description="Authenticated user id")
    email: str = Field(..., description="Authenticated user email")
    expires_at: datetime = Field(..., description="Session expiration timestamp")


__all__ = ["SessionPayload", "CookieOptions", "SessionCreateRequest", "SessionResponse"]

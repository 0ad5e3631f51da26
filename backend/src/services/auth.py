"""Session issuance and verification backed by signed JWT cookies."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import status

from ..models.auth import CookieOptions, SessionPayload
from .config import AppConfig, get_config
from .cookies import CookieStore

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "auth-token"
SESSION_TTL = timedelta(days=7)
DEFAULT_DEV_JWT_SECRET = "uigen-development-secret-key-not-for-production"


class AuthError(Exception):
    """Domain-specific authentication error."""

    def __init__(
        self,
        error: str,
        message: str,
        *,
        status_code: int = status.HTTP_401_UNAUTHORIZED,
        detail: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.error = error
        self.message = message
        self.status_code = status_code
        self.detail = detail or {}


def resolve_jwt_secret(config: AppConfig) -> str:
    """Return the configured signing secret, or the development fallback.

    Production configs without a secret never get this far: AppConfig
    refuses to build them.
    """
    if config.jwt_secret_key:
        return config.jwt_secret_key
    logger.warning(
        "JWT_SECRET_KEY is not set; signing sessions with the built-in development secret",
        extra={"environment": config.environment},
    )
    return DEFAULT_DEV_JWT_SECRET


class SessionSigner:
    """Signs and verifies session payloads as HS256 JWTs."""

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self.secret = secret
        self.algorithm = algorithm

    async def sign(self, payload: SessionPayload) -> str:
        issued_at = datetime.now(timezone.utc)
        return jwt.encode(
            payload.to_claims(issued_at),
            self.secret,
            algorithm=self.algorithm,
        )

    def verify(self, token: str) -> SessionPayload:
        try:
            decoded = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise AuthError("token_expired", "Session expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthError("invalid_token", f"Invalid session token: {exc}") from exc

        try:
            return SessionPayload(
                user_id=decoded["user_id"],
                email=decoded["email"],
                expires_at=decoded["expires_at"],
            )
        except (KeyError, ValueError) as exc:
            raise AuthError("invalid_token", "Session token is missing claims") from exc


class SessionService:
    """Create, read and delete the auth-token session cookie."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        signer: SessionSigner | None = None,
    ) -> None:
        self.config = config or get_config()
        self.signer = signer or SessionSigner(resolve_jwt_secret(self.config))

    def cookie_options(self, expires_at: datetime) -> CookieOptions:
        return CookieOptions(
            httponly=True,
            secure=self.config.is_production,
            samesite="lax",
            expires=expires_at,
            path="/",
        )

    async def create_session(self, user_id: str, email: str, cookies: CookieStore) -> None:
        """Sign a 7-day session for the user and store it in the auth-token cookie.

        Signing failures propagate to the caller.
        """
        expires_at = datetime.now(timezone.utc) + SESSION_TTL
        payload = SessionPayload(user_id=user_id, email=email, expires_at=expires_at)
        token = await self.signer.sign(payload)

        cookies.set(SESSION_COOKIE_NAME, token, self.cookie_options(expires_at))
        logger.info(
            "Session created",
            extra={"user_id": user_id, "expires_at": expires_at.isoformat()},
        )

    async def verify_session(self, token: Optional[str]) -> Optional[SessionPayload]:
        """Return the payload of a valid token, or None."""
        if not token:
            return None
        try:
            return self.signer.verify(token)
        except AuthError as exc:
            logger.debug("Rejected session token", extra={"error": exc.error})
            return None

    async def get_session(self, cookies: CookieStore) -> Optional[SessionPayload]:
        return await self.verify_session(cookies.get(SESSION_COOKIE_NAME))

    async def delete_session(self, cookies: CookieStore) -> None:
        cookies.delete(SESSION_COOKIE_NAME)
        logger.info("Session deleted")


__all__ = [
    "AuthError",
    "SessionService",
    "SessionSigner",
    "resolve_jwt_secret",
    "SESSION_COOKIE_NAME",
    "SESSION_TTL",
    "DEFAULT_DEV_JWT_SECRET",
]

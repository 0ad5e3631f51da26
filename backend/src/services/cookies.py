"""Cookie store abstraction used by the session service."""

from __future__ import annotations

import abc
from typing import Optional

from fastapi import Request, Response

from ..models.auth import CookieOptions


class CookieStore(abc.ABC):
    """Named cookie access for one request/response cycle."""

    @abc.abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Return the cookie value, or None if it is not present."""

    @abc.abstractmethod
    def set(self, name: str, value: str, options: CookieOptions) -> None:
        """Write a cookie, replacing any existing cookie of the same name."""

    @abc.abstractmethod
    def delete(self, name: str) -> None:
        """Expire the cookie on the client."""


class ResponseCookieStore(CookieStore):
    """Reads cookies from the incoming request and writes them to the response."""

    def __init__(self, request: Request, response: Response) -> None:
        self.request = request
        self.response = response

    def get(self, name: str) -> Optional[str]:
        return self.request.cookies.get(name)

    def set(self, name: str, value: str, options: CookieOptions) -> None:
        self.response.set_cookie(
            key=name,
            value=value,
            expires=options.expires,
            path=options.path,
            secure=options.secure,
            httponly=options.httponly,
            samesite=options.samesite,
        )

    def delete(self, name: str) -> None:
        self.response.delete_cookie(key=name, path="/")


__all__ = ["CookieStore", "ResponseCookieStore"]

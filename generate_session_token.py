#!/usr/bin/env python3
"""Generate a session token and matching Cookie header for local testing."""

import asyncio
import sys
from typing import Dict, Optional

from dotenv import load_dotenv

from backend.src.models.auth import CookieOptions
from backend.src.services.auth import SESSION_COOKIE_NAME, SessionService
from backend.src.services.cookies import CookieStore

load_dotenv()


class CapturingCookieStore(CookieStore):
    """Keeps written cookies in memory instead of sending them to a client."""

    def __init__(self) -> None:
        self.cookies: Dict[str, str] = {}
        self.options: Dict[str, CookieOptions] = {}

    def get(self, name: str) -> Optional[str]:
        return self.cookies.get(name)

    def set(self, name: str, value: str, options: CookieOptions) -> None:
        self.cookies[name] = value
        self.options[name] = options

    def delete(self, name: str) -> None:
        self.cookies.pop(name, None)
        self.options.pop(name, None)


async def generate_token(user_id: str, email: str) -> Optional[str]:
    """Issue a session for the user and print it."""
    try:
        service = SessionService()
        store = CapturingCookieStore()
        await service.create_session(user_id, email, store)
    except Exception as e:
        print(f"❌ Error generating session: {e}")
        print("💡 Check ENVIRONMENT and JWT_SECRET_KEY in your environment")
        return None

    token = store.cookies[SESSION_COOKIE_NAME]
    expires = store.options[SESSION_COOKIE_NAME].expires
    print(f"✅ Generated session for '{user_id}' <{email}> (expires {expires.isoformat()}):")
    print(token)
    print("\n📋 Send it as:")
    print(f"Cookie: {SESSION_COOKIE_NAME}={token}")
    return token


if __name__ == "__main__":
    user_id = sys.argv[1] if len(sys.argv) > 1 else "local-dev"
    email = sys.argv[2] if len(sys.argv) > 2 else "local-dev@example.com"
    asyncio.run(generate_token(user_id, email))

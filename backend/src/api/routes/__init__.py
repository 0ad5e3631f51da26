"""HTTP API route handlers."""

from . import auth, tools

__all__ = ["auth", "tools"]

"""FastAPI application main entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from .middleware import register_error_handlers  # noqa: E402
from .routes import auth, tools  # noqa: E402
from ..services.config import get_config  # noqa: E402

logger = logging.getLogger(__name__)

# Fails at import time when ENVIRONMENT=production and no JWT secret is set
config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan handler to log the active deployment mode."""
    logger.info(
        "Starting UIGen API",
        extra={
            "environment": config.environment,
            "local_mode": config.enable_local_mode,
            "jwt_secret_configured": bool(config.jwt_secret_key),
        },
    )
    yield


app = FastAPI(
    title="UIGen API",
    description="Session cookies and tool-call status messages for the component builder",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.frontend_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(auth.router, tags=["auth"])
app.include_router(tools.router, tags=["tools"])


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


__all__ = ["app"]

"""Application configuration helpers."""

from __future__ import annotations

from functools import lru_cache
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

PRODUCTION_ENVIRONMENT = "production"


class AppConfig(BaseModel):
    """Runtime configuration loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    environment: str = Field(
        default="development",
        description="Deployment mode; only 'production' enables secure cookies",
    )
    jwt_secret_key: Optional[str] = Field(
        default=None,
        description="HMAC secret for session JWT signing (required in production)",
    )
    enable_local_mode: bool = Field(
        default=True,
        description="Allow the development login route outside production",
    )
    frontend_origin: str = Field(
        default="http://localhost:3000",
        description="Origin of the web client allowed by CORS",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION_ENVIRONMENT

    @field_validator("environment", mode="before")
    @classmethod
    def _default_environment(cls, value: Optional[str]) -> str:
        # Compared verbatim: "Production" or " production" is not production
        return "development" if value is None else value

    @field_validator("jwt_secret_key", mode="before")
    @classmethod
    def _ensure_secret(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        cleaned = value.strip()
        if not cleaned:
            # Empty is treated the same as unset
            return None
        return cleaned

    @model_validator(mode="after")
    def _require_secret_in_production(self) -> "AppConfig":
        if self.is_production and not self.jwt_secret_key:
            raise ValueError(
                "JWT_SECRET_KEY is required when ENVIRONMENT=production"
            )
        return self


def _read_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Load and cache application configuration."""
    environment = _read_env("ENVIRONMENT", "development")
    jwt_secret = _read_env("JWT_SECRET_KEY")
    enable_local_mode = _read_env("ENABLE_LOCAL_MODE", "true").lower() not in {
        "0",
        "false",
        "no",
    }
    frontend_origin = _read_env("FRONTEND_ORIGIN", "http://localhost:3000")

    return AppConfig(
        environment=environment,
        jwt_secret_key=jwt_secret,
        enable_local_mode=enable_local_mode,
        frontend_origin=frontend_origin,
    )


def reload_config() -> AppConfig:
    """Clear cached config (useful for tests) and reload."""
    get_config.cache_clear()
    return get_config()


__all__ = ["AppConfig", "get_config", "reload_config", "PRODUCTION_ENVIRONMENT"]

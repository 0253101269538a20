"""
resthandler: Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the route builder, and the Foo example.
When:  Loaded once at module import time; invalid values fail on startup.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, model_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Deployments exposing the Foo
    example beyond localhost should override AUTH_SECRET and CORS_ORIGINS.
    """

    # ── Routing ───────────────────────────────────────────────────────────
    # Resource routes live under {api_prefix}/{version}/{resource_name}
    api_prefix: str = Field(default="/api", description="URL prefix for resource routes")

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Normalizes the prefix to '/segment' form ('' mounts at the root)."""
        stripped = v.strip().strip("/")
        return f"/{stripped}" if stripped else ""

    # ── Pagination ────────────────────────────────────────────────────────
    # What: Bounds for the `limit` query parameter on list reads
    default_page_limit: int = Field(default=100, ge=1, le=1000)
    max_page_limit: int = Field(default=1000, ge=1, le=10000)

    @model_validator(mode="after")
    def validate_page_limits(self) -> "Settings":
        if self.default_page_limit > self.max_page_limit:
            raise ValueError(
                f"default_page_limit ({self.default_page_limit}) exceeds "
                f"max_page_limit ({self.max_page_limit})"
            )
        return self

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, or "*"
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Example Authentication ────────────────────────────────────────────
    # Shared secret the Foo example expects in the Authorization header
    auth_secret: str = Field(default="secret")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # API_PREFIX and api_prefix both work
    }


# Singleton instance, imported throughout the application
settings = Settings()

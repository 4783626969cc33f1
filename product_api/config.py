"""
Runtime configuration read from environment variables.

Defaults are provided for every field so the server can start with no
environment at all.  ``Settings()`` reads the environment when it is
constructed, which lets tests build their own instance after patching
variables.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str) -> str:
    # set-but-empty counts as unset
    return os.getenv(name) or default


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Product API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))

    # Shared secret expected in the x-api-key (or api-key) header on
    # create, update and delete.
    api_key: str = field(default_factory=lambda: _env("API_KEY", "dev-secret-key"))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    cors_origins: List[str] = field(default_factory=lambda: _split_origins(_env("CORS_ORIGINS", "*")))


settings = Settings()

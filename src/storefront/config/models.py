"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, storefront.toml only contains
overrides. A fresh checkout needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- storefront.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section.

    ``url`` is any SQLAlchemy URL. When unset, a SQLite file named
    ``storefront.db`` is created under the settings root.
    """

    model_config = {"frozen": True}

    url: str | None = None
    echo: bool = False


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 8080


class SecurityConfig(BaseModel):
    """[security] section."""

    model_config = {"frozen": True}

    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

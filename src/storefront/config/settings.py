"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``STOREFRONT_*`` prefix, ``__`` for nested sections
  3. TOML file: ``storefront.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from storefront.config.discovery import find_config, read_toml
from storefront.config.models import DatabaseConfig, SecurityConfig, ServerConfig

DEFAULT_DB_FILENAME = "storefront.db"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of a ``storefront.toml`` file into the settings.

    Unknown top-level tables are ignored so one file can also carry
    settings for other tools.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        raw = read_toml(toml_path) if toml_path is not None else {}
        known = set(settings_cls.model_fields)
        self._data: dict[str, Any] = {k: v for k, v in raw.items() if k in known}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class StoreSettings(BaseSettings):
    """Unified settings for the storefront CLI and HTTP server.

    Attributes:
        root: Directory holding ``storefront.toml`` (or CWD when none was
            found). The default SQLite database lives here.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STOREFRONT_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    @property
    def database_url(self) -> str:
        """Configured SQLAlchemy URL, or a SQLite file under :attr:`root`."""
        if self.database.url:
            return self.database.url
        return f"sqlite:///{self.root / DEFAULT_DB_FILENAME}"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        database_url: str | None = None,
        **cli_flags: Any,
    ) -> StoreSettings:
        """Construct settings from a CLI invocation.

        Discovers ``storefront.toml`` via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory, and merges
        CLI flags as highest-priority overrides. *database_url* overrides
        only the ``url`` key of the ``[database]`` section.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            settings = cls(root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

        if database_url:
            database = settings.database.model_copy(update={"url": database_url})
            settings = settings.model_copy(update={"database": database})
        return settings

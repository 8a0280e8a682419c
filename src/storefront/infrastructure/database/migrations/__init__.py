"""Alembic wiring for the storefront schema.

There is no alembic.ini: the config is built in code from the database
URL, and the revision scripts ship inside this package.
"""

from __future__ import annotations

from pathlib import Path

from alembic.config import Config
from alembic.script import ScriptDirectory

MIGRATIONS_DIR = Path(__file__).parent


def build_config(db_url: str) -> Config:
    """Alembic Config for *db_url* pointing at the bundled revisions."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # Config values go through ConfigParser interpolation; URL-encoded
    # passwords contain '%'.
    cfg.set_main_option("sqlalchemy.url", db_url.replace("%", "%%"))
    return cfg


def script_directory() -> ScriptDirectory:
    """The bundled revision scripts (no database needed)."""
    return ScriptDirectory(str(MIGRATIONS_DIR))

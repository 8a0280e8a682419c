"""Database engine setup.

Any SQLAlchemy URL works. SQLite (the default) gets foreign keys turned on
for every connection, and WAL mode when it is file-backed so concurrent
request threads can read while one writes.

SQLAlchemy Core (not ORM) is used: every operation is a short statement
sequence inside one transaction, with no use for identity maps.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from storefront.infrastructure.database.schema import metadata


def create_db_engine(url: str, *, echo: bool = False) -> Engine:
    """Create an engine for *url* with SQLite pragmas applied on connect."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, echo=echo, pool_pre_ping=True)

    in_memory = parsed.database in (None, "", ":memory:")
    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if in_memory:
        # One shared connection, otherwise each checkout sees an empty database.
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, echo=echo, **kwargs)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        if not in_memory:
            cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(url: str, *, echo: bool = False) -> Engine:
    """Create all tables from :data:`schema.metadata` and return the engine.

    Idempotent: safe to call on an existing database.
    """
    engine = create_db_engine(url, echo=echo)
    metadata.create_all(engine)
    return engine

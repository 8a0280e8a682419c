"""Dialect-aware atomic insert helpers.

Both helpers compile to a single statement guarded by a unique constraint,
so concurrent callers racing on the same key cannot create duplicate rows
or lose increments:

- SQLite / PostgreSQL: ``INSERT .. ON CONFLICT (keys) DO NOTHING | DO UPDATE``
- MySQL / MariaDB: ``INSERT .. ON DUPLICATE KEY UPDATE``

*keys* must name the columns of a unique constraint on *table*.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy.dialects import mysql, postgresql, sqlite

if TYPE_CHECKING:
    from sqlalchemy import Connection, Table

_ON_CONFLICT_INSERTS: dict[str, Callable[..., Any]] = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}
_DUPLICATE_KEY_DIALECTS = frozenset({"mysql", "mariadb"})


def _unsupported(dialect: str) -> NotImplementedError:
    supported = sorted({*_ON_CONFLICT_INSERTS, *_DUPLICATE_KEY_DIALECTS})
    return NotImplementedError(
        f"Atomic upsert is not implemented for dialect {dialect!r}. Supported: {supported}"
    )


def insert_if_absent(
    conn: Connection,
    table: Table,
    values: dict[str, Any],
    keys: Sequence[str],
) -> None:
    """Insert *values* unless a row with the same *keys* already exists."""
    dialect = conn.dialect.name
    if dialect in _ON_CONFLICT_INSERTS:
        stmt = _ON_CONFLICT_INSERTS[dialect](table).values(**values)
        conn.execute(stmt.on_conflict_do_nothing(index_elements=list(keys)))
        return
    if dialect in _DUPLICATE_KEY_DIALECTS:
        stmt = mysql.insert(table).values(**values)
        # Self-assignment: MySQL has no DO NOTHING form.
        key = keys[0]
        conn.execute(stmt.on_duplicate_key_update({key: table.c[key]}))
        return
    raise _unsupported(dialect)


def insert_or_increment(
    conn: Connection,
    table: Table,
    values: dict[str, Any],
    keys: Sequence[str],
    column: str,
    *,
    touch: Sequence[str] = (),
) -> None:
    """Insert *values*, or add ``values[column]`` to the existing row's *column*.

    Columns named in *touch* are overwritten with the new values on conflict
    (e.g. ``updated_at``). Everything else on an existing row is left alone.
    """
    dialect = conn.dialect.name
    if dialect in _ON_CONFLICT_INSERTS:
        stmt = _ON_CONFLICT_INSERTS[dialect](table).values(**values)
        set_: dict[str, Any] = {column: table.c[column] + stmt.excluded[column]}
        set_.update({name: stmt.excluded[name] for name in touch})
        conn.execute(stmt.on_conflict_do_update(index_elements=list(keys), set_=set_))
        return
    if dialect in _DUPLICATE_KEY_DIALECTS:
        stmt = mysql.insert(table).values(**values)
        updates: dict[str, Any] = {column: table.c[column] + stmt.inserted[column]}
        updates.update({name: stmt.inserted[name] for name in touch})
        conn.execute(stmt.on_duplicate_key_update(updates))
        return
    raise _unsupported(dialect)

"""Tests for the atomic insert helpers on SQLite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from sqlalchemy import select

from storefront.infrastructure.database.schema import cart, cart_item
from storefront.infrastructure.database.upsert import insert_if_absent, insert_or_increment
from storefront.infrastructure.store import Store

NOW = "2026-01-01T00:00:00+00:00"
LATER = "2026-02-01T00:00:00+00:00"


def _cart_row(customer_id: int = 1, name: str = "default", ts: str = NOW) -> dict:
    return {"customer_id": customer_id, "cart_name": name, "created_at": ts, "updated_at": ts}


class TestInsertIfAbsent:
    def test_inserts_once(self, seeded_store: Store) -> None:
        with seeded_store.engine.begin() as conn:
            insert_if_absent(conn, cart, _cart_row(), keys=("customer_id", "cart_name"))
            insert_if_absent(conn, cart, _cart_row(ts=LATER), keys=("customer_id", "cart_name"))
            rows = conn.execute(select(cart)).mappings().all()
        assert len(rows) == 1
        assert rows[0]["created_at"] == NOW

    def test_unsupported_dialect(self) -> None:
        conn = MagicMock()
        conn.dialect.name = "oracle"
        with pytest.raises(NotImplementedError, match="oracle"):
            insert_if_absent(conn, cart, _cart_row(), keys=("customer_id", "cart_name"))


class TestInsertOrIncrement:
    def _setup_cart(self, store: Store) -> int:
        with store.engine.begin() as conn:
            insert_if_absent(conn, cart, _cart_row(), keys=("customer_id", "cart_name"))
            return int(conn.execute(select(cart.c.cart_id)).scalar_one())

    def test_insert_then_increment(self, seeded_store: Store) -> None:
        cart_id = self._setup_cart(seeded_store)
        keys = ("cart_id", "product_id")
        with seeded_store.engine.begin() as conn:
            for qty, ts in ((2, NOW), (3, LATER)):
                insert_or_increment(
                    conn,
                    cart_item,
                    {
                        "cart_id": cart_id,
                        "product_id": 10,
                        "quantity": qty,
                        "created_at": ts,
                        "updated_at": ts,
                    },
                    keys=keys,
                    column="quantity",
                    touch=("updated_at",),
                )
            row = conn.execute(select(cart_item)).mappings().one()
        assert row["quantity"] == 5
        assert row["created_at"] == NOW
        assert row["updated_at"] == LATER

    def test_unsupported_dialect(self) -> None:
        conn = MagicMock()
        conn.dialect.name = "mssql"
        with pytest.raises(NotImplementedError):
            insert_or_increment(
                conn, cart_item, {"quantity": 1}, keys=("cart_id", "product_id"), column="quantity"
            )


class TestCompiledStatements:
    """The MySQL branch is only compiled here; no server is needed."""

    def test_mysql_increment_uses_duplicate_key_update(self) -> None:
        from sqlalchemy.dialects import mysql

        conn = MagicMock()
        conn.dialect.name = "mysql"
        insert_or_increment(
            conn,
            cart_item,
            {"cart_id": 1, "product_id": 2, "quantity": 3, "created_at": NOW, "updated_at": NOW},
            keys=("cart_id", "product_id"),
            column="quantity",
        )
        stmt = conn.execute.call_args.args[0]
        sql = str(stmt.compile(dialect=mysql.dialect()))
        assert "ON DUPLICATE KEY UPDATE" in sql
        assert "cart_item.quantity +" in sql

    def test_postgres_insert_if_absent_does_nothing_on_conflict(self) -> None:
        from sqlalchemy.dialects import postgresql

        conn = MagicMock()
        conn.dialect.name = "postgresql"
        insert_if_absent(conn, cart, _cart_row(), keys=("customer_id", "cart_name"))
        stmt = conn.execute.call_args.args[0]
        sql = str(stmt.compile(dialect=postgresql.dialect()))
        assert "ON CONFLICT (customer_id, cart_name) DO NOTHING" in sql

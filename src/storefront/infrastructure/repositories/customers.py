"""Read-only repository for customer rows."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine

from storefront.infrastructure.database.schema import customer


class CustomerRepository:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_all(self) -> list[dict[str, Any]]:
        """All customer rows in id order, password hash included."""
        stmt = select(customer).order_by(customer.c.customer_id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]

    def get_by_id(self, customer_id: int) -> dict[str, Any] | None:
        stmt = select(customer).where(customer.c.customer_id == customer_id)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def get_by_email(self, email: str) -> dict[str, Any] | None:
        stmt = select(customer).where(customer.c.email == email)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

"""Read-only repository for product search."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine

from storefront.infrastructure.database.schema import product


class ProductRepository:
    """Encapsulates SQL for product lookups."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def search(
        self,
        *,
        description: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
    ) -> list[dict[str, Any]]:
        """Filter products by description substring and inclusive price bounds.

        Each filter is applied only when given. No ranking: rows come back
        in id order.
        """
        stmt = select(product).order_by(product.c.product_id)
        if description:
            stmt = stmt.where(product.c.description.ilike(f"%{description}%"))
        if min_price is not None:
            stmt = stmt.where(product.c.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(product.c.price <= max_price)

        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]

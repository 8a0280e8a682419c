"""Read-only repository for carts and their product-joined line items."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine

from storefront.infrastructure.database.schema import cart, cart_item, product


class CartRepository:
    """Encapsulates SQL for listing a customer's carts."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_carts_with_items(self, customer_id: int) -> list[dict[str, Any]]:
        """Fetch every cart owned by *customer_id* with its line items.

        Items are inner-joined against ``product``; an item whose product row
        is gone is left out. Carts and items come back in primary-key order.
        All reads share one connection, so a failure on any cart aborts the
        whole listing.
        """
        carts_stmt = (
            select(cart.c.cart_id, cart.c.cart_name)
            .where(cart.c.customer_id == customer_id)
            .order_by(cart.c.cart_id)
        )
        items_stmt = (
            select(
                product.c.product_id,
                product.c.product_name,
                cart_item.c.quantity,
                product.c.price,
            )
            .select_from(cart_item.join(product, cart_item.c.product_id == product.c.product_id))
            .order_by(cart_item.c.cart_item_id)
        )

        result: list[dict[str, Any]] = []
        with self._engine.connect() as conn:
            for row in conn.execute(carts_stmt).mappings().all():
                items = conn.execute(
                    items_stmt.where(cart_item.c.cart_id == row["cart_id"])
                ).mappings()
                result.append(
                    {
                        "cart_id": int(row["cart_id"]),
                        "cart_name": str(row["cart_name"]),
                        "items": [dict(item) for item in items],
                    }
                )
        return result

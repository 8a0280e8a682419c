"""CartService: named carts and their line items.

add_item pipeline: VALIDATE → RESOLVE CART → MERGE ITEM → RESPOND

Both resolution steps are single-statement upserts against unique
constraints and share one transaction, so concurrent identical requests
converge on one cart row and one item row with every increment counted.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from sqlalchemy.exc import SQLAlchemyError

from storefront.domain.validation import validate_cart_line, validate_id
from storefront.services._helpers import format_price, now_iso
from storefront.services.base import BaseService
from storefront.services.result import ServiceResult

logger = logging.getLogger(__name__)
log = structlog.get_logger(__name__)


class CartService(BaseService):
    """Cart aggregation (add_item) and cart listing (list_carts)."""

    def add_item(
        self,
        customer_id: int,
        cart_name: str,
        product_id: int,
        quantity: int,
    ) -> ServiceResult:
        """Add *quantity* of a product to the customer's cart named *cart_name*.

        The cart is created on first use of the name; surrounding whitespace
        is not part of it. The line item is created on first add of the
        product and incremented afterwards, so repeating the same call keeps
        increasing the quantity.

        Returns ``data = {cart_id, product_id, quantity}`` where quantity is
        the line item's total after this call.
        """
        op = "add_item"

        # ── VALIDATE ──────────────────────────────────────────────
        cart_name = cart_name.strip()
        errors = validate_cart_line(customer_id, cart_name, product_id, quantity)
        if errors:
            return ServiceResult.failure(op, "VALIDATION_FAILED", "; ".join(errors))

        now = now_iso()
        try:
            with self._store.transaction() as txn:
                # ── RESOLVE CART ──────────────────────────────────
                cart_id = txn.ensure_cart(customer_id, cart_name, now)
                # ── MERGE ITEM ────────────────────────────────────
                total = txn.merge_cart_item(cart_id, product_id, quantity, now)
        except SQLAlchemyError:
            logger.exception(
                "add_item failed for customer=%s cart=%r product=%s",
                customer_id,
                cart_name,
                product_id,
            )
            return ServiceResult.failure(
                op,
                "CART_WRITE_FAILED",
                "Cannot add item to cart",
                customer_id=customer_id,
                cart_name=cart_name,
                product_id=product_id,
            )

        log.info(
            "cart.item_added",
            customer_id=customer_id,
            cart_id=cart_id,
            product_id=product_id,
            added=quantity,
            quantity=total,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"cart_id": cart_id, "product_id": product_id, "quantity": total},
        )

    def list_carts(self, customer_id: int) -> ServiceResult:
        """All carts of *customer_id* with product-joined line items.

        A customer with no carts gets an empty list. Each item carries
        ``product_id``, ``product_name``, ``quantity`` and ``price`` (as a
        two-place decimal string).
        """
        op = "list_carts"
        errors = validate_id("customer_id", customer_id)
        if errors:
            return ServiceResult.failure(op, "VALIDATION_FAILED", errors[0])

        try:
            rows = self._store.carts.list_carts_with_items(customer_id)
        except SQLAlchemyError:
            logger.exception("list_carts failed for customer=%s", customer_id)
            return ServiceResult.failure(
                op,
                "CART_READ_FAILED",
                "Cannot retrieve carts",
                customer_id=customer_id,
            )

        carts: list[dict[str, Any]] = []
        for row in rows:
            items = [
                {
                    "product_id": int(item["product_id"]),
                    "product_name": item["product_name"],
                    "quantity": int(item["quantity"]),
                    "price": format_price(item["price"]),
                }
                for item in row["items"]
            ]
            carts.append({"cart_id": row["cart_id"], "cart_name": row["cart_name"], "items": items})

        return ServiceResult(ok=True, op=op, data={"carts": carts})

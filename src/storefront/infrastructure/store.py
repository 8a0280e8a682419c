"""Store: the persistence gateway handed to every service.

The Store owns the database engine. It is constructed once at process
start (CLI root or HTTP app factory) and passed by reference into
services; nothing reaches the database through module-level state.

Writes go through :meth:`Store.transaction`, which yields a
:class:`StoreTransaction` bound to one connection. Every write helper on
the transaction is a single statement, so a service operation composed of
several helpers commits or rolls back as a unit.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update

from storefront.infrastructure.database.engine import init_database
from storefront.infrastructure.database.schema import cart, cart_item, customer
from storefront.infrastructure.database.upsert import insert_if_absent, insert_or_increment
from storefront.infrastructure.repositories import (
    CartRepository,
    CustomerRepository,
    ProductRepository,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from storefront.config.settings import StoreSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# StoreTransaction: yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Active transaction with write helpers for cart and customer rows."""

    conn: Connection

    # ------------------------------------------------------------------
    # Carts
    # ------------------------------------------------------------------

    def ensure_cart(self, customer_id: int, cart_name: str, now: str) -> int:
        """Return the id of the (customer, name) cart, creating it if absent."""
        insert_if_absent(
            self.conn,
            cart,
            {
                "customer_id": customer_id,
                "cart_name": cart_name,
                "created_at": now,
                "updated_at": now,
            },
            keys=("customer_id", "cart_name"),
        )
        cart_id = self.conn.execute(
            select(cart.c.cart_id).where(
                cart.c.customer_id == customer_id,
                cart.c.cart_name == cart_name,
            )
        ).scalar_one()
        return int(cart_id)

    def merge_cart_item(self, cart_id: int, product_id: int, quantity: int, now: str) -> int:
        """Add *quantity* of a product to a cart; return the resulting quantity.

        Creates the line item on first add, increments it afterwards.
        """
        insert_or_increment(
            self.conn,
            cart_item,
            {
                "cart_id": cart_id,
                "product_id": product_id,
                "quantity": quantity,
                "created_at": now,
                "updated_at": now,
            },
            keys=("cart_id", "product_id"),
            column="quantity",
            touch=("updated_at",),
        )
        total = self.conn.execute(
            select(cart_item.c.quantity).where(
                cart_item.c.cart_id == cart_id,
                cart_item.c.product_id == product_id,
            )
        ).scalar_one()
        return int(total)

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    def insert_customer(self, values: dict[str, Any]) -> int:
        """Insert a customer row and return its generated id."""
        result = self.conn.execute(insert(customer).values(**values))
        return int(result.inserted_primary_key[0])

    def update_customer(self, customer_id: int, values: dict[str, Any]) -> bool:
        """Update columns of one customer. Returns False if no row matched."""
        result = self.conn.execute(
            update(customer).where(customer.c.customer_id == customer_id).values(**values)
        )
        return result.rowcount > 0


# ---------------------------------------------------------------------------
# Store: the gateway
# ---------------------------------------------------------------------------


class Store:
    """Persistence gateway encapsulating the engine and read repositories."""

    def __init__(self, settings: StoreSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(
            settings.database_url,
            echo=settings.database.echo,
        )
        self._carts = CartRepository(self._engine)
        self._customers = CustomerRepository(self._engine)
        self._products = ProductRepository(self._engine)

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    @property
    def carts(self) -> CartRepository:
        return self._carts

    @property
    def customers(self) -> CustomerRepository:
        return self._customers

    @property
    def products(self) -> ProductRepository:
        return self._products

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Run a block of writes in one database transaction.

        Commits when the block exits normally, rolls back on any exception
        (which is re-raised).

        Usage::

            with store.transaction() as txn:
                cart_id = txn.ensure_cart(1, "default", now)
                txn.merge_cart_item(cart_id, 10, 2, now)
        """
        with self._engine.begin() as conn:
            yield StoreTransaction(conn=conn)

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
        logger.debug("Store engine disposed")

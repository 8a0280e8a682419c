"""SQLAlchemy Core table definitions for the storefront database.

Table and column names match the legacy MySQL schema so an existing
database can be pointed at directly and stamped at the baseline revision.
Timestamps are ISO 8601 UTC strings. Keyed text columns are bounded
VARCHARs because MySQL cannot index unbounded TEXT.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

customer = Table(
    "customer",
    metadata,
    Column("customer_id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(100), nullable=False, default="", server_default=""),
    Column("last_name", String(100), nullable=False, default="", server_default=""),
    Column("email", String(255), nullable=False, unique=True),
    Column("phone_number", String(32)),
    Column("address", Text),
    Column("password", Text, nullable=False),  # bcrypt hash
    Column("created_at", String(40), nullable=False),
    Column("updated_at", String(40), nullable=False),
)

product = Table(
    "product",
    metadata,
    Column("product_id", Integer, primary_key=True, autoincrement=True),
    Column("product_name", String(255), nullable=False),
    Column("description", Text),
    Column("price", Numeric(10, 2), nullable=False),
    Column("stock_quantity", Integer, default=0, server_default="0"),
    Column("created_at", String(40)),
    Column("updated_at", String(40)),
)

cart = Table(
    "cart",
    metadata,
    Column("cart_id", Integer, primary_key=True, autoincrement=True),
    Column("customer_id", Integer, ForeignKey("customer.customer_id"), nullable=False),
    Column("cart_name", String(255), nullable=False),
    Column("created_at", String(40), nullable=False),
    Column("updated_at", String(40), nullable=False),
    UniqueConstraint("customer_id", "cart_name", name="uq_cart_customer_name"),
)

cart_item = Table(
    "cart_item",
    metadata,
    Column("cart_item_id", Integer, primary_key=True, autoincrement=True),
    Column("cart_id", Integer, ForeignKey("cart.cart_id"), nullable=False),
    Column("product_id", Integer, ForeignKey("product.product_id"), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("created_at", String(40), nullable=False),
    Column("updated_at", String(40), nullable=False),
    UniqueConstraint("cart_id", "product_id", name="uq_cart_item_cart_product"),
)

# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_cart_customer", cart.c.customer_id)
Index("ix_cart_item_cart", cart_item.c.cart_id)
Index("ix_product_price", product.c.price)

"""Baseline schema: customer, product, cart, cart_item.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-19

Databases created by ``storefront init`` are stamped at this revision
without running it; ``storefront upgrade`` applies it to an empty database.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "customer",
        sa.Column("customer_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False, server_default=""),
        sa.Column("last_name", sa.String(100), nullable=False, server_default=""),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("phone_number", sa.String(32)),
        sa.Column("address", sa.Text),
        sa.Column("password", sa.Text, nullable=False),
        sa.Column("created_at", sa.String(40), nullable=False),
        sa.Column("updated_at", sa.String(40), nullable=False),
    )

    op.create_table(
        "product",
        sa.Column("product_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock_quantity", sa.Integer, server_default="0"),
        sa.Column("created_at", sa.String(40)),
        sa.Column("updated_at", sa.String(40)),
    )
    op.create_index("ix_product_price", "product", ["price"])

    op.create_table(
        "cart",
        sa.Column("cart_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "customer_id", sa.Integer, sa.ForeignKey("customer.customer_id"), nullable=False
        ),
        sa.Column("cart_name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.String(40), nullable=False),
        sa.Column("updated_at", sa.String(40), nullable=False),
        sa.UniqueConstraint("customer_id", "cart_name", name="uq_cart_customer_name"),
    )
    op.create_index("ix_cart_customer", "cart", ["customer_id"])

    op.create_table(
        "cart_item",
        sa.Column("cart_item_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("cart_id", sa.Integer, sa.ForeignKey("cart.cart_id"), nullable=False),
        sa.Column("product_id", sa.Integer, sa.ForeignKey("product.product_id"), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("created_at", sa.String(40), nullable=False),
        sa.Column("updated_at", sa.String(40), nullable=False),
        sa.UniqueConstraint("cart_id", "product_id", name="uq_cart_item_cart_product"),
    )
    op.create_index("ix_cart_item_cart", "cart_item", ["cart_id"])


def downgrade() -> None:
    op.drop_index("ix_cart_item_cart", table_name="cart_item")
    op.drop_table("cart_item")
    op.drop_index("ix_cart_customer", table_name="cart")
    op.drop_table("cart")
    op.drop_index("ix_product_price", table_name="product")
    op.drop_table("product")
    op.drop_table("customer")

"""Database engine, schema, and atomic upsert helpers via SQLAlchemy Core."""

from storefront.infrastructure.database.engine import create_db_engine, init_database
from storefront.infrastructure.database.schema import cart, cart_item, customer, metadata, product
from storefront.infrastructure.database.upsert import insert_if_absent, insert_or_increment

__all__ = [
    "cart",
    "cart_item",
    "create_db_engine",
    "customer",
    "init_database",
    "insert_if_absent",
    "insert_or_increment",
    "metadata",
    "product",
]

"""Read-side repositories encapsulating SELECT and JOIN SQL."""

from storefront.infrastructure.repositories.carts import CartRepository
from storefront.infrastructure.repositories.customers import CustomerRepository
from storefront.infrastructure.repositories.products import ProductRepository

__all__ = ["CartRepository", "CustomerRepository", "ProductRepository"]

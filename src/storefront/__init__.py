"""storefront: e-commerce backend with customer accounts, product search, and named carts."""

__version__ = "0.1.0"

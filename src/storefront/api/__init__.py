"""HTTP surface: FastAPI app factory and routers over the service layer."""

from storefront.api.app import create_app

__all__ = ["create_app"]

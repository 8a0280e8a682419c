"""Product search endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from storefront.api.deps import get_store
from storefront.api.errors import error_response
from storefront.infrastructure.store import Store
from storefront.services.product import ProductService

router = APIRouter(tags=["products"])


@router.get("/showPD")
def search_products(
    description: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    store: Store = Depends(get_store),
) -> Any:
    """Filter by description substring and price range (zero bounds are ignored)."""
    result = ProductService(store).search(
        description=description,
        min_price=min_price,
        max_price=max_price,
    )
    if not result.ok:
        return error_response(result)
    return {"products": result.data["products"]}

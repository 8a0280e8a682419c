"""Cart endpoints: add an item to a named cart, list a customer's carts."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Path

from storefront.api.deps import get_store
from storefront.api.errors import error_response
from storefront.api.schemas import AddItemRequest
from storefront.domain.validation import MAX_INT
from storefront.infrastructure.store import Store
from storefront.services.cart import CartService

router = APIRouter(prefix="/cart", tags=["carts"])


@router.post("/add-item")
def add_item(body: AddItemRequest, store: Store = Depends(get_store)) -> Any:
    result = CartService(store).add_item(
        body.customer_id,
        body.cart_name,
        body.product_id,
        body.quantity,
    )
    if not result.ok:
        return error_response(result)
    return {"message": "Item added to cart successfully", **result.data}


@router.get("/showall/{customer_id}")
def show_all(
    customer_id: int = Path(ge=1, le=MAX_INT), store: Store = Depends(get_store)
) -> Any:
    result = CartService(store).list_carts(customer_id)
    if not result.ok:
        return error_response(result)
    return {"carts": result.data["carts"]}

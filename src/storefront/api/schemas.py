"""Request bodies for the JSON endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt

from storefront.domain.validation import MAX_INT

# JSON booleans and numeric strings are not ids or quantities.
RowId = Annotated[StrictInt, Field(ge=1, le=MAX_INT)]
Quantity = Annotated[StrictInt, Field(ge=1, le=MAX_INT)]


class RegisterRequest(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str
    password: str
    phone_number: str | None = None
    address: str | None = None


class LoginRequest(BaseModel):
    email: str
    password: str


class UpdateAddressRequest(BaseModel):
    customer_id: RowId
    address: str


class ChangePasswordRequest(BaseModel):
    customer_id: RowId
    old_password: str
    new_password: str


class AddItemRequest(BaseModel):
    customer_id: RowId
    cart_name: str
    product_id: RowId
    quantity: Quantity

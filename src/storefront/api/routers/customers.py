"""Customer account endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_store
from storefront.api.errors import error_response
from storefront.api.schemas import (
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
    UpdateAddressRequest,
)
from storefront.infrastructure.store import Store
from storefront.services.customer import CustomerService

router = APIRouter(tags=["customers"])


@router.get("/user/get")
def list_customers(store: Store = Depends(get_store)) -> Any:
    result = CustomerService(store).list_customers()
    if not result.ok:
        return error_response(result)
    return {"data": result.data["customers"]}


@router.post("/user/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, store: Store = Depends(get_store)) -> Any:
    result = CustomerService(store).register(**body.model_dump())
    if not result.ok:
        return error_response(result)
    return {"message": "User registered successfully", "data": result.data}


@router.post("/customer/login")
def login(body: LoginRequest, store: Store = Depends(get_store)) -> Any:
    result = CustomerService(store).login(body.email, body.password)
    if not result.ok:
        return error_response(result)
    return result.data


@router.put("/user/update-address")
def update_address(body: UpdateAddressRequest, store: Store = Depends(get_store)) -> Any:
    result = CustomerService(store).update_address(body.customer_id, body.address)
    if not result.ok:
        return error_response(result)
    return {"message": "Address updated successfully", "data": result.data}


@router.put("/user/change-password")
def change_password(body: ChangePasswordRequest, store: Store = Depends(get_store)) -> Any:
    result = CustomerService(store).change_password(
        body.customer_id, body.old_password, body.new_password
    )
    if not result.ok:
        return error_response(result)
    return {"message": "Password updated successfully", "data": result.data}

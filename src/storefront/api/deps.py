"""Dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Request

from storefront.infrastructure.store import Store


def get_store(request: Request) -> Store:
    """The Store the app was created with."""
    return request.app.state.store

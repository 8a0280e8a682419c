"""BaseService: foundation for all storefront services.

Every service receives the :class:`Store` at construction time and owns
its transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.infrastructure.store import Store


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CartService(BaseService):
            def add_item(self, ...) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

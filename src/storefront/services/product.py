"""ProductService: catalog search."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from storefront.services._helpers import format_price
from storefront.services.base import BaseService
from storefront.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ProductService(BaseService):
    def search(
        self,
        *,
        description: str | None = None,
        min_price: Decimal | float | None = None,
        max_price: Decimal | float | None = None,
    ) -> ServiceResult:
        """Find products whose description contains *description*.

        Price bounds are inclusive and ignored unless positive, so a zero
        bound means "no bound".
        """
        op = "search_products"
        lower = Decimal(str(min_price)) if min_price and min_price > 0 else None
        upper = Decimal(str(max_price)) if max_price and max_price > 0 else None
        try:
            rows = self._store.products.search(
                description=description or None,
                min_price=lower,
                max_price=upper,
            )
        except SQLAlchemyError:
            logger.exception("product search failed")
            return ServiceResult.failure(op, "PRODUCT_READ_FAILED", "Cannot search products")

        products = [{**row, "price": format_price(row["price"])} for row in rows]
        return ServiceResult(ok=True, op=op, data={"products": products})

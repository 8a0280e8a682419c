"""Tests for shared service helpers."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from storefront.services._helpers import format_price, now_iso, public_customer


class TestFormatPrice:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("129"), "129.00"),
            (Decimal("12.5"), "12.50"),
            (7, "7.00"),
            (19.99, "19.99"),
        ],
    )
    def test_two_places(self, value: object, expected: str) -> None:
        assert format_price(value) == expected


class TestNowIso:
    def test_parses_with_timezone(self) -> None:
        assert datetime.fromisoformat(now_iso()).tzinfo is not None


class TestPublicCustomer:
    def test_drops_password(self) -> None:
        row = {"customer_id": 1, "email": "a@b.c", "password": "hash"}
        assert public_customer(row) == {"customer_id": 1, "email": "a@b.c"}

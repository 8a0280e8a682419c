"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any


def now_iso() -> str:
    """Current UTC time as ISO 8601 (row created_at / updated_at)."""
    return datetime.now(UTC).isoformat()


def format_price(value: Any) -> str:
    """Render a stored price as a two-place decimal string.

    Examples:
        >>> format_price(Decimal("129.5"))
        '129.50'
        >>> format_price(10)
        '10.00'
    """
    return f"{Decimal(str(value)).quantize(Decimal('0.01'))}"


def public_customer(row: dict[str, Any]) -> dict[str, Any]:
    """Customer row without the password hash."""
    return {key: value for key, value in row.items() if key != "password"}

"""Input rules for cart and customer operations.

Each validator returns a list of error messages; empty means valid.
"""

from __future__ import annotations

# Ids and quantities are stored in 32-bit INTEGER columns on MySQL.
MAX_INT = 2**31 - 1


def validate_id(name: str, value: int) -> list[str]:
    """Check that a row id is a positive 32-bit integer."""
    if not 1 <= value <= MAX_INT:
        return [f"{name} must be between 1 and {MAX_INT}, got {value}"]
    return []


def validate_cart_line(
    customer_id: int,
    cart_name: str,
    product_id: int,
    quantity: int,
) -> list[str]:
    """Check an add-to-cart request.

    *cart_name* is expected already stripped; it is the stored key.
    """
    errors = validate_id("customer_id", customer_id)
    errors += validate_id("product_id", product_id)
    if not cart_name:
        errors.append("cart_name must not be empty")
    if not 1 <= quantity <= MAX_INT:
        errors.append(f"quantity must be between 1 and {MAX_INT}, got {quantity}")
    return errors


def validate_registration(email: str, password: str) -> list[str]:
    """Check the minimum a customer row needs: an email and a password."""
    errors: list[str] = []
    if "@" not in email:
        errors.append(f"invalid email address: {email!r}")
    if not password:
        errors.append("password must not be empty")
    return errors


def normalize_email(email: str) -> str:
    """Emails are matched case-insensitively and without surrounding space."""
    return email.strip().lower()

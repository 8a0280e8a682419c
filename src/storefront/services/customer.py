"""CustomerService: registration, login, and profile updates.

Passwords are stored as bcrypt hashes and never leave the service: every
returned profile has the ``password`` column stripped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from storefront.domain.passwords import check_password, hash_password
from storefront.domain.validation import normalize_email, validate_id, validate_registration
from storefront.services._helpers import now_iso, public_customer
from storefront.services.base import BaseService
from storefront.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CustomerService(BaseService):
    """Customer account operations."""

    @property
    def _rounds(self) -> int:
        return self._store.settings.security.bcrypt_rounds

    def list_customers(self) -> ServiceResult:
        op = "list_customers"
        try:
            rows = self._store.customers.list_all()
        except SQLAlchemyError:
            logger.exception("list_customers failed")
            return ServiceResult.failure(op, "CUSTOMER_READ_FAILED", "Cannot retrieve customers")
        return ServiceResult(
            ok=True,
            op=op,
            data={"customers": [public_customer(row) for row in rows]},
        )

    def register(
        self,
        *,
        email: str,
        password: str,
        first_name: str = "",
        last_name: str = "",
        phone_number: str | None = None,
        address: str | None = None,
    ) -> ServiceResult:
        """Create a customer account with a hashed password."""
        op = "register"
        email = normalize_email(email)
        errors = validate_registration(email, password)
        if errors:
            return ServiceResult.failure(op, "VALIDATION_FAILED", "; ".join(errors))

        now = now_iso()
        values: dict[str, Any] = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "phone_number": phone_number,
            "address": address,
            "password": hash_password(password, rounds=self._rounds),
            "created_at": now,
            "updated_at": now,
        }
        try:
            with self._store.transaction() as txn:
                customer_id = txn.insert_customer(values)
        except IntegrityError:
            return ServiceResult.failure(
                op, "EMAIL_TAKEN", f"Email already registered: {email}", email=email
            )
        except SQLAlchemyError:
            logger.exception("register failed for %s", email)
            return ServiceResult.failure(op, "CUSTOMER_WRITE_FAILED", "Cannot register customer")

        logger.info("Registered customer %s (%s)", customer_id, email)
        return ServiceResult(
            ok=True,
            op=op,
            data=public_customer({"customer_id": customer_id, **values}),
        )

    def login(self, email: str, password: str) -> ServiceResult:
        """Check credentials; unknown email and wrong password look the same."""
        op = "login"
        try:
            row = self._store.customers.get_by_email(normalize_email(email))
        except SQLAlchemyError:
            logger.exception("login lookup failed")
            return ServiceResult.failure(op, "CUSTOMER_READ_FAILED", "Cannot look up customer")

        if row is None or not check_password(password, row["password"]):
            return ServiceResult.failure(op, "INVALID_CREDENTIALS", "Invalid email or password")
        return ServiceResult(ok=True, op=op, data=public_customer(row))

    def update_address(self, customer_id: int, address: str) -> ServiceResult:
        op = "update_address"
        return self._update_profile(
            op,
            customer_id,
            lambda _row: {"address": address},
            failure_message="Failed to update address",
        )

    def change_password(
        self,
        customer_id: int,
        old_password: str,
        new_password: str,
    ) -> ServiceResult:
        """Replace the password after verifying *old_password*."""
        op = "change_password"
        if not new_password:
            return ServiceResult.failure(op, "VALIDATION_FAILED", "password must not be empty")

        def changes(row: dict[str, Any]) -> dict[str, Any] | None:
            if not check_password(old_password, row["password"]):
                return None
            return {"password": hash_password(new_password, rounds=self._rounds)}

        return self._update_profile(
            op,
            customer_id,
            changes,
            failure_message="Failed to change password",
            mismatch_message="Old password is incorrect",
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _update_profile(
        self,
        op: str,
        customer_id: int,
        changes: Callable[[dict[str, Any]], dict[str, Any] | None],
        *,
        failure_message: str,
        mismatch_message: str = "",
    ) -> ServiceResult:
        """Load → compute changes → write → reload.

        *changes* maps the current row to the column updates, or to None
        when the request must be refused with INVALID_CREDENTIALS.
        """
        errors = validate_id("customer_id", customer_id)
        if errors:
            return ServiceResult.failure(op, "VALIDATION_FAILED", errors[0])

        try:
            row = self._store.customers.get_by_id(customer_id)
        except SQLAlchemyError:
            logger.exception("%s lookup failed for customer=%s", op, customer_id)
            return ServiceResult.failure(op, "CUSTOMER_READ_FAILED", "Cannot look up customer")
        if row is None:
            return ServiceResult.failure(
                op, "CUSTOMER_NOT_FOUND", "User not found", customer_id=customer_id
            )

        updates = changes(row)
        if updates is None:
            return ServiceResult.failure(op, "INVALID_CREDENTIALS", mismatch_message)
        updates["updated_at"] = now_iso()

        try:
            with self._store.transaction() as txn:
                found = txn.update_customer(customer_id, updates)
        except SQLAlchemyError:
            logger.exception("%s failed for customer=%s", op, customer_id)
            return ServiceResult.failure(op, "CUSTOMER_WRITE_FAILED", failure_message)
        if not found:
            return ServiceResult.failure(
                op, "CUSTOMER_NOT_FOUND", "User not found", customer_id=customer_id
            )

        return ServiceResult(ok=True, op=op, data=public_customer({**row, **updates}))

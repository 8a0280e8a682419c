"""Shared pytest fixtures and test helpers for storefront tests."""

from __future__ import annotations

from collections.abc import Generator
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient
from sqlalchemy import insert

from storefront.api.app import create_app
from storefront.config.models import SecurityConfig
from storefront.config.settings import StoreSettings
from storefront.infrastructure.database.schema import customer, product
from storefront.infrastructure.store import Store

# Minimum bcrypt cost keeps hashing fast under test.
FAST_SECURITY = SecurityConfig(bcrypt_rounds=4)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's STOREFRONT_* environment out of tests."""
    for name in ("STOREFRONT_CONFIG", "STOREFRONT_ROOT", "STOREFRONT_DATABASE__URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> StoreSettings:
    """Settings rooted at a temp dir, with a file-backed SQLite database."""
    return StoreSettings.from_cli(root=tmp_path, security=FAST_SECURITY)


@pytest.fixture
def store(settings: StoreSettings) -> Generator[Store]:
    """Store over a freshly created database."""
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def seeded_store(store: Store) -> Store:
    """Store with customers 1 and 2 and products 10, 11, 12."""
    seed_customer(store, 1, "ann@example.com")
    seed_customer(store, 2, "bob@example.com")
    seed_product(store, 10, "Oil filter", "12.50", description="Engine oil filter")
    seed_product(store, 11, "Brake pads", "89.90", description="Front brake pads")
    seed_product(store, 12, "Wiper blade", "7.00", description="Rear wiper")
    return store


@pytest.fixture
def client(seeded_store: Store) -> TestClient:
    """HTTP client for an app bound to the seeded store."""
    return TestClient(create_app(seeded_store))


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI's default database lands there.

    Use via ``@pytest.mark.usefixtures("_isolated_root")``.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def seed_customer(store: Store, customer_id: int, email: str, **extra: Any) -> None:
    """Insert a customer row directly (password is not a usable hash)."""
    values: dict[str, Any] = {
        "customer_id": customer_id,
        "first_name": "Test",
        "last_name": f"Customer{customer_id}",
        "email": email,
        "password": "not-a-hash",
        "created_at": "2026-01-01T00:00:00+00:00",
        "updated_at": "2026-01-01T00:00:00+00:00",
        **extra,
    }
    with store.engine.begin() as conn:
        conn.execute(insert(customer).values(**values))


def seed_product(
    store: Store,
    product_id: int,
    name: str,
    price: str,
    *,
    description: str | None = None,
) -> None:
    """Insert a product row directly."""
    with store.engine.begin() as conn:
        conn.execute(
            insert(product).values(
                product_id=product_id,
                product_name=name,
                description=description,
                price=Decimal(price),
                stock_quantity=5,
            )
        )

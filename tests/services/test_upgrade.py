"""Tests for UpgradeService: Alembic migration state."""

from __future__ import annotations

from sqlalchemy import inspect

from storefront.infrastructure.store import Store
from storefront.services.upgrade import UpgradeService


class TestCheckPending:
    def test_unstamped_database_has_pending(self, store: Store) -> None:
        result = UpgradeService(store).check_pending()
        assert result.ok
        assert result.data["current"] is None
        assert result.data["head"] == "001_baseline"
        assert result.data["pending_count"] == 1

    def test_stamped_database_is_current(self, store: Store) -> None:
        svc = UpgradeService(store)
        assert svc.stamp_current().ok
        result = svc.check_pending()
        assert result.data["pending_count"] == 0
        assert result.data["current"] == result.data["head"]


class TestApply:
    def test_existing_tables_are_stamped(self, store: Store) -> None:
        result = UpgradeService(store).apply()
        assert result.ok, result.error
        assert result.data["action"] == "stamped"
        assert result.data["current"] == "001_baseline"
        assert "alembic_version" in inspect(store.engine).get_table_names()

    def test_apply_twice_is_noop(self, store: Store) -> None:
        svc = UpgradeService(store)
        svc.apply()
        result = svc.apply()
        assert result.ok
        assert result.data["applied_count"] == 0
        assert result.data["message"] == "Database is already up to date"

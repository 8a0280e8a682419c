"""UpgradeService: database schema migrations with Alembic.

Pipeline: CHECK → MIGRATE (or STAMP) → REPORT
"""

from __future__ import annotations

import logging
from typing import Any

from alembic import command
from alembic.runtime.migration import MigrationContext
from sqlalchemy import inspect

from storefront.infrastructure.database.migrations import build_config, script_directory
from storefront.services.base import BaseService
from storefront.services.result import ServiceResult

logger = logging.getLogger(__name__)

_CORE_TABLES = frozenset({"customer", "product", "cart", "cart_item"})


class UpgradeService(BaseService):
    """Reports and applies pending Alembic revisions."""

    def _db_url(self) -> str:
        return self._store.settings.database_url

    def _tables_exist(self) -> bool:
        """True when the schema is already present (pre-Alembic database)."""
        names = set(inspect(self._store.engine).get_table_names())
        return _CORE_TABLES <= names

    def _run(self, action: str, *args: Any) -> None:
        """Run an alembic command over the store's own engine."""
        cfg = build_config(self._db_url())
        with self._store.engine.begin() as conn:
            cfg.attributes["connection"] = conn
            getattr(command, action)(cfg, *args)

    def check_pending(self) -> ServiceResult:
        """List pending migrations without applying."""
        op = "upgrade"
        try:
            script = script_directory()
            head = script.get_current_head()

            with self._store.engine.connect() as conn:
                current = MigrationContext.configure(conn).get_current_revision()

            pending: list[dict[str, Any]] = []
            if head is not None and current != head:
                # Newest first, down to (not including) the current revision.
                pending = [
                    {"revision": rev.revision, "description": rev.doc or ""}
                    for rev in script.iterate_revisions(head, current or "base")
                ]
        except Exception as exc:
            logger.exception("Failed to inspect migration state")
            return ServiceResult.failure(
                op, "CHECK_FAILED", f"Failed to check migrations: {exc}"
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "pending_count": len(pending),
                "pending": pending,
                "current": current,
                "head": head,
            },
        )

    def stamp_current(self) -> ServiceResult:
        """Mark the database as at head without running migrations."""
        op = "stamp"
        try:
            self._run("stamp", "head")
        except Exception as exc:
            logger.exception("Failed to stamp database")
            return ServiceResult.failure(op, "STAMP_FAILED", f"Stamp failed: {exc}")
        return self.check_pending().model_copy(update={"op": op})

    def apply(self) -> ServiceResult:
        """CHECK → MIGRATE (or STAMP) → REPORT."""
        op = "upgrade"

        check = self.check_pending()
        if not check.ok:
            return check

        pending_count = check.data["pending_count"]
        if pending_count == 0:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "applied_count": 0,
                    "current": check.data["head"],
                    "message": "Database is already up to date",
                },
            )

        try:
            if check.data["current"] is None and self._tables_exist():
                # Tables created by init_database but never versioned.
                self._run("stamp", "head")
                action = "stamped"
            else:
                self._run("upgrade", "head")
                action = "migrated"
        except Exception as exc:
            logger.exception("Migration failed")
            return ServiceResult.failure(op, "MIGRATION_FAILED", f"Migration failed: {exc}")

        logger.info("Database %s to %s", action, check.data["head"])
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "applied_count": pending_count,
                "action": action,
                "current": check.data["head"],
                "applied": check.data["pending"],
            },
        )

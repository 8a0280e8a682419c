"""Command: database initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefront.commands._base import StoreCommand

if TYPE_CHECKING:
    from storefront.commands._context import AppContext


@click.command(
    "init",
    cls=StoreCommand,
    examples="""\
  storefront init
  storefront --database-url sqlite:////var/lib/storefront/shop.db init
  storefront --json init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create all tables and mark the schema as current."""
    from storefront.services.upgrade import UpgradeService

    result = UpgradeService(app.store).stamp_current()
    app.emit(result.model_copy(update={"op": "init"}))

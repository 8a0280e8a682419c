"""Command: bring the storefront database schema up to the bundled head."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from sqlalchemy.engine import make_url

from storefront.commands._base import StoreCommand

if TYPE_CHECKING:
    from storefront.commands._context import AppContext
    from storefront.services.result import ServiceResult


def _with_target(result: ServiceResult, database_url: str) -> ServiceResult:
    """Tag a successful result with the database it ran against, password masked."""
    if not result.ok:
        return result
    target = make_url(database_url).render_as_string(hide_password=True)
    return result.model_copy(update={"data": {"database": target, **result.data}})


@click.command(
    cls=StoreCommand,
    examples="""\
  storefront upgrade
  storefront upgrade --check
  storefront upgrade --check --strict   # exit 1 before deploy if behind
  storefront --database-url mysql+pymysql://shop:pw@db/shop upgrade""",
)
@click.option(
    "--check", "check_only", is_flag=True, help="Show pending migrations without applying."
)
@click.option(
    "--strict",
    is_flag=True,
    help="With --check, exit 1 when the database is behind the bundled schema.",
)
@click.pass_obj
def upgrade(app: AppContext, check_only: bool, strict: bool) -> None:
    """Migrate the customer, product and cart tables to the latest revision.

    A database created before migrations were tracked is stamped rather
    than migrated.
    """
    from storefront.services.result import ServiceResult
    from storefront.services.upgrade import UpgradeService

    svc = UpgradeService(app.store)
    if not check_only:
        app.emit(_with_target(svc.apply(), app.settings.database_url))
        return

    result = _with_target(svc.check_pending(), app.settings.database_url)
    if strict and result.ok and result.data["pending_count"]:
        result = ServiceResult.failure(
            result.op,
            "MIGRATIONS_PENDING",
            f"{result.data['pending_count']} migration(s) pending on {result.data['database']}",
        )
    app.emit(result)

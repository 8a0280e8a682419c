"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Opens the Store lazily and routes result output
(stdout/stderr and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefront.output.formatters import format_result

if TYPE_CHECKING:
    from storefront.config.settings import StoreSettings
    from storefront.infrastructure.store import Store
    from storefront.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is created on first use so ``--help`` and ``--version``
    never touch the database.
    """

    def __init__(self, settings: StoreSettings) -> None:
        self.settings = settings
        self._store: Store | None = None

        from storefront.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> Store:
        if self._store is None:
            from storefront.infrastructure.store import Store

            self._store = Store(self.settings)
        return self._store

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult; failures go to stderr and exit with code 1."""
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

"""Root CLI group for storefront with global flags and command registration."""

from __future__ import annotations

import click

from storefront import __version__
from storefront.commands import register_commands
from storefront.commands._context import AppContext
from storefront.config.settings import StoreSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="storefront")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--database-url", default=None, help="Override [database] url.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    database_url: str | None,
) -> None:
    """storefront: customer, product, and cart backend."""
    settings = StoreSettings.from_cli(
        config_path=config_path,
        database_url=database_url,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

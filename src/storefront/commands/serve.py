"""serve: run the JSON HTTP API under uvicorn."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefront.commands._base import StoreCommand

if TYPE_CHECKING:
    from storefront.commands._context import AppContext


@click.command(
    cls=StoreCommand,
    examples="""\
  # Bind to [server] host/port from storefront.toml (default 127.0.0.1:8080)
  storefront serve

  # Listen on all interfaces
  storefront serve --host 0.0.0.0 --port 9000""",
)
@click.option("--host", default=None, help="Bind address (default: [server] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [server] port).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Start the HTTP API server."""
    import uvicorn

    from storefront.api.app import create_app

    server = app.settings.server
    try:
        uvicorn.run(
            create_app(app.store),
            host=host or server.host,
            port=port or server.port,
            log_config=None,
        )
    finally:
        app.close()

"""Subcommand modules for storefront.

register_commands() uses deferred imports to keep ``storefront --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    from storefront.commands.cart import cart

    cli.add_command(cart)

    from storefront.commands.init_cmd import init_cmd
    from storefront.commands.serve import serve
    from storefront.commands.upgrade import upgrade

    cli.add_command(init_cmd)
    cli.add_command(upgrade)
    cli.add_command(serve)

"""Command group: add items to named carts and list a customer's carts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefront.commands._base import StoreGroup
from storefront.services.cart import CartService

if TYPE_CHECKING:
    from storefront.commands._context import AppContext

_CART_EXAMPLES = """\
  storefront cart add 1 default 10 --quantity 2
  storefront cart add 1 wishlist 10
  storefront cart show 1
  storefront --json cart show 1"""


@click.group(cls=StoreGroup, examples=_CART_EXAMPLES)
@click.pass_obj
def cart(app: AppContext) -> None:
    """Manage customer carts."""


@cart.command(
    examples="""\
  storefront cart add 1 default 10
  storefront cart add 1 "birthday list" 42 --quantity 3"""
)
@click.argument("customer_id", type=int)
@click.argument("cart_name")
@click.argument("product_id", type=int)
@click.option("-n", "--quantity", default=1, type=int, show_default=True, help="Units to add.")
@click.pass_obj
def add(app: AppContext, customer_id: int, cart_name: str, product_id: int, quantity: int) -> None:
    """Add a product to a customer's cart, creating the cart if needed."""
    app.emit(CartService(app.store).add_item(customer_id, cart_name, product_id, quantity))


@cart.command(
    examples="""\
  storefront cart show 1
  storefront --json cart show 1"""
)
@click.argument("customer_id", type=int)
@click.pass_obj
def show(app: AppContext, customer_id: int) -> None:
    """List every cart of a customer with its items."""
    app.emit(CartService(app.store).list_carts(customer_id))

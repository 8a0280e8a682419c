"""Tests for CartRepository reads."""

from __future__ import annotations

from decimal import Decimal

from storefront.infrastructure.store import Store

NOW = "2026-03-01T12:00:00+00:00"


def _add(store: Store, customer_id: int, name: str, product_id: int, qty: int) -> int:
    with store.transaction() as txn:
        cart_id = txn.ensure_cart(customer_id, name, NOW)
        txn.merge_cart_item(cart_id, product_id, qty, NOW)
    return cart_id


class TestListCartsWithItems:
    def test_no_carts(self, seeded_store: Store) -> None:
        assert seeded_store.carts.list_carts_with_items(1) == []

    def test_price_is_decimal(self, seeded_store: Store) -> None:
        _add(seeded_store, 1, "default", 10, 2)
        [listed] = seeded_store.carts.list_carts_with_items(1)
        [item] = listed["items"]
        assert item["price"] == Decimal("12.50")
        assert item["product_name"] == "Oil filter"

    def test_empty_cart_has_no_items(self, seeded_store: Store) -> None:
        with seeded_store.transaction() as txn:
            txn.ensure_cart(1, "empty", NOW)
        [listed] = seeded_store.carts.list_carts_with_items(1)
        assert listed["items"] == []

    def test_items_in_insertion_order(self, seeded_store: Store) -> None:
        for product_id in (12, 10, 11):
            _add(seeded_store, 1, "default", product_id, 1)
        [listed] = seeded_store.carts.list_carts_with_items(1)
        assert [i["product_id"] for i in listed["items"]] == [12, 10, 11]

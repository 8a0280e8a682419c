"""Tests for GET /showPD and GET /health."""

from __future__ import annotations

from fastapi.testclient import TestClient


class TestShowProducts:
    def test_all_products(self, client: TestClient) -> None:
        resp = client.get("/showPD")
        assert resp.status_code == 200
        names = [p["product_name"] for p in resp.json()["products"]]
        assert names == ["Oil filter", "Brake pads", "Wiper blade"]

    def test_description_filter(self, client: TestClient) -> None:
        resp = client.get("/showPD", params={"description": "brake"})
        [product] = resp.json()["products"]
        assert product["product_id"] == 11
        assert product["price"] == "89.90"

    def test_price_range(self, client: TestClient) -> None:
        resp = client.get("/showPD", params={"min_price": 10, "max_price": 50})
        assert [p["product_id"] for p in resp.json()["products"]] == [10]

    def test_zero_bounds_ignored(self, client: TestClient) -> None:
        resp = client.get("/showPD", params={"min_price": 0, "max_price": 0})
        assert len(resp.json()["products"]) == 3

    def test_non_numeric_price_bad_request(self, client: TestClient) -> None:
        resp = client.get("/showPD", params={"min_price": "cheap"})
        assert resp.status_code == 400
        assert "min_price" in resp.json()["error"]


class TestHealth:
    def test_ok(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_request_id_header_accepted(self, client: TestClient) -> None:
        resp = client.get("/health", headers={"x-request-id": "req-1"})
        assert resp.status_code == 200

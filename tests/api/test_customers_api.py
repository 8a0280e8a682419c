"""Tests for the customer account endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

NEW_USER = {
    "first_name": "Cy",
    "last_name": "Doe",
    "email": "cy@example.com",
    "password": "s3cret",
    "phone_number": "555-0100",
    "address": "1 Main St",
}


def _register(client: TestClient) -> int:
    resp = client.post("/user/register", json=NEW_USER)
    assert resp.status_code == 201
    return resp.json()["data"]["customer_id"]


class TestListCustomers:
    def test_lists_seeded_without_passwords(self, client: TestClient) -> None:
        resp = client.get("/user/get")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert [c["email"] for c in data] == ["ann@example.com", "bob@example.com"]
        assert all("password" not in c for c in data)


class TestRegister:
    def test_created(self, client: TestClient) -> None:
        resp = client.post("/user/register", json=NEW_USER)
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "User registered successfully"
        assert body["data"]["email"] == "cy@example.com"
        assert "password" not in body["data"]

    def test_duplicate_email_conflict(self, client: TestClient) -> None:
        _register(client)
        resp = client.post("/user/register", json=NEW_USER)
        assert resp.status_code == 409

    def test_invalid_email_bad_request(self, client: TestClient) -> None:
        resp = client.post("/user/register", json={**NEW_USER, "email": "nope"})
        assert resp.status_code == 400

    def test_missing_password_bad_request(self, client: TestClient) -> None:
        body = {k: v for k, v in NEW_USER.items() if k != "password"}
        assert client.post("/user/register", json=body).status_code == 400


class TestLogin:
    def test_success_returns_profile(self, client: TestClient) -> None:
        customer_id = _register(client)
        resp = client.post(
            "/customer/login", json={"email": "cy@example.com", "password": "s3cret"}
        )
        assert resp.status_code == 200
        assert resp.json()["customer_id"] == customer_id
        assert "password" not in resp.json()

    def test_wrong_password_unauthorized(self, client: TestClient) -> None:
        _register(client)
        resp = client.post(
            "/customer/login", json={"email": "cy@example.com", "password": "wrong"}
        )
        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid email or password"}

    def test_unknown_email_unauthorized(self, client: TestClient) -> None:
        resp = client.post("/customer/login", json={"email": "x@example.com", "password": "p"})
        assert resp.status_code == 401


class TestUpdateAddress:
    def test_updates(self, client: TestClient) -> None:
        customer_id = _register(client)
        resp = client.put(
            "/user/update-address", json={"customer_id": customer_id, "address": "2 Elm St"}
        )
        assert resp.status_code == 200
        assert resp.json()["message"] == "Address updated successfully"
        assert resp.json()["data"]["address"] == "2 Elm St"

    def test_unknown_customer(self, client: TestClient) -> None:
        resp = client.put("/user/update-address", json={"customer_id": 404, "address": "x"})
        assert resp.status_code == 401
        assert resp.json() == {"error": "User not found"}

    def test_oversized_customer_id_is_bad_request(self, client: TestClient) -> None:
        resp = client.put(
            "/user/update-address", json={"customer_id": 2**63, "address": "x"}
        )
        assert resp.status_code == 400
        assert "customer_id" in resp.json()["error"]


class TestChangePassword:
    def test_changes_and_new_password_works(self, client: TestClient) -> None:
        customer_id = _register(client)
        resp = client.put(
            "/user/change-password",
            json={"customer_id": customer_id, "old_password": "s3cret", "new_password": "n3w"},
        )
        assert resp.status_code == 200
        assert resp.json()["message"] == "Password updated successfully"
        login = client.post("/customer/login", json={"email": "cy@example.com", "password": "n3w"})
        assert login.status_code == 200

    def test_wrong_old_password(self, client: TestClient) -> None:
        customer_id = _register(client)
        resp = client.put(
            "/user/change-password",
            json={"customer_id": customer_id, "old_password": "bad", "new_password": "n3w"},
        )
        assert resp.status_code == 401
        assert resp.json() == {"error": "Old password is incorrect"}

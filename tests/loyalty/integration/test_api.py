"""Integration tests for the Loyalty API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from loyalty.api.routes import customer_router, maintenance_router, order_router
from loyalty.customer.customer import Customer
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(customer_router)
    app.include_router(order_router)
    app.include_router(maintenance_router)
    register_exception_handlers(app)
    return TestClient(app)


def _create_customer(client, **overrides):
    defaults = {"name": "Test User", "email": "test@example.com"}
    defaults.update(overrides)
    response = client.post("/customers", json=defaults)
    assert response.status_code == 201
    return response.json()["id"]


def _create_order(client, customer_id, amount="100.00"):
    response = client.post("/orders", json={"customer_id": customer_id, "amount": amount})
    assert response.status_code == 201
    return response.json()


class TestCustomerEndpoints:
    def test_create_customer(self, client):
        response = client.post("/customers", json={"name": "Test User", "email": "test@example.com"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Test User"
        assert data["email"] == "test@example.com"
        assert data["tier"] == "REGULAR"
        assert data["total_orders"] == 0

        customer = current_domain.repository_for(Customer).get(data["id"])
        assert customer.email == "test@example.com"

    def test_create_customer_with_tier(self, client):
        customer_id = _create_customer(client, tier="GOLD")
        assert client.get(f"/customers/{customer_id}").json()["tier"] == "GOLD"

    def test_duplicate_email_returns_error(self, client):
        _create_customer(client)
        response = client.post("/customers", json={"name": "Other", "email": "test@example.com"})
        assert response.status_code == 400
        assert len(client.get("/customers").json()) == 1

    def test_invalid_email_returns_error(self, client):
        response = client.post("/customers", json={"name": "Test User", "email": "not-an-email"})
        assert response.status_code == 400

    def test_unknown_tier_returns_error(self, client):
        response = client.post("/customers", json={"name": "Test User", "email": "t@example.com", "tier": "SILVER"})
        assert response.status_code == 400

    def test_get_customer(self, client):
        customer_id = _create_customer(client)
        response = client.get(f"/customers/{customer_id}")
        assert response.status_code == 200
        assert response.json()["id"] == customer_id

    def test_get_unknown_customer(self, client):
        response = client.get("/customers/does-not-exist")
        assert response.status_code == 404

    def test_get_customer_by_email(self, client):
        customer_id = _create_customer(client)
        response = client.get("/customers/email/test@example.com")
        assert response.status_code == 200
        assert response.json()["id"] == customer_id

    def test_get_unknown_email(self, client):
        response = client.get("/customers/email/nobody@example.com")
        assert response.status_code == 404

    def test_list_customers(self, client):
        _create_customer(client, email="a@example.com")
        _create_customer(client, email="b@example.com")
        response = client.get("/customers")
        assert response.status_code == 200
        assert {c["email"] for c in response.json()} == {"a@example.com", "b@example.com"}

    def test_update_customer(self, client):
        customer_id = _create_customer(client)
        response = client.put(
            f"/customers/{customer_id}",
            json={"name": "New Name", "email": "new@example.com"},
        )
        assert response.status_code == 200
        assert response.json()["name"] == "New Name"
        assert response.json()["email"] == "new@example.com"

    def test_update_to_taken_email_returns_error(self, client):
        _create_customer(client, email="a@example.com")
        customer_id = _create_customer(client, email="b@example.com")
        response = client.put(
            f"/customers/{customer_id}",
            json={"name": "B", "email": "a@example.com"},
        )
        assert response.status_code == 400

    def test_update_unknown_customer(self, client):
        response = client.put(
            "/customers/does-not-exist",
            json={"name": "X", "email": "x@example.com"},
        )
        assert response.status_code == 404

    def test_delete_customer(self, client):
        customer_id = _create_customer(client)
        response = client.delete(f"/customers/{customer_id}")
        assert response.status_code == 204
        assert client.get(f"/customers/{customer_id}").status_code == 404

    def test_delete_unknown_customer(self, client):
        assert client.delete("/customers/does-not-exist").status_code == 404


class TestOrderEndpoints:
    def test_create_order(self, client):
        customer_id = _create_customer(client)

        data = _create_order(client, customer_id)

        assert data["customer_id"] == customer_id
        assert data["amount"] == "100.00"
        assert data["discount_amount"] == "0.00"
        assert data["final_amount"] == "100.00"
        assert data["order_date"]

    def test_gold_discount_from_eleventh_order(self, client):
        customer_id = _create_customer(client)
        for _ in range(10):
            _create_order(client, customer_id)

        data = _create_order(client, customer_id)

        assert data["discount_amount"] == "10.00"
        assert data["final_amount"] == "90.00"
        customer = client.get(f"/customers/{customer_id}").json()
        assert customer["tier"] == "GOLD"
        assert customer["total_orders"] == 11

    def test_order_for_unknown_customer(self, client):
        response = client.post("/orders", json={"customer_id": "does-not-exist", "amount": "10.00"})
        assert response.status_code == 404
        assert client.get("/orders").json() == []

    def test_non_positive_amount_returns_error(self, client):
        customer_id = _create_customer(client)
        response = client.post("/orders", json={"customer_id": customer_id, "amount": "-1.00"})
        assert response.status_code == 400

    def test_get_order(self, client):
        customer_id = _create_customer(client)
        order = _create_order(client, customer_id)
        response = client.get(f"/orders/{order['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == order["id"]

    def test_get_unknown_order(self, client):
        assert client.get("/orders/does-not-exist").status_code == 404

    def test_list_orders(self, client):
        customer_id = _create_customer(client)
        _create_order(client, customer_id, "10.00")
        _create_order(client, customer_id, "20.00")
        assert len(client.get("/orders").json()) == 2

    def test_orders_for_customer(self, client):
        customer_id = _create_customer(client)
        other_id = _create_customer(client, email="other@example.com")
        _create_order(client, customer_id, "10.00")
        _create_order(client, other_id, "20.00")

        response = client.get(f"/orders/customer/{customer_id}")

        assert response.status_code == 200
        assert [o["amount"] for o in response.json()] == ["10.00"]

    def test_orders_for_unknown_customer(self, client):
        assert client.get("/orders/customer/does-not-exist").status_code == 404


class TestMaintenanceEndpoints:
    def test_sweep_tier_progressions(self, client, email_channel):
        customer_id = _create_customer(client)
        for _ in range(9):
            _create_order(client, customer_id, "10.00")
        email_channel.reset()

        response = client.post("/maintenance/tier-progressions")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "alerted_count": 1}
        assert len(email_channel.sent_emails) == 1

    def test_sweep_with_as_of(self, client):
        response = client.post("/maintenance/tier-progressions", json={"as_of": "2024-01-01T00:00:00"})
        assert response.status_code == 200
        assert response.json()["alerted_count"] == 0

"""Component tests for the order history endpoint."""
from fastapi.testclient import TestClient

from tests.helpers import auth_headers


def buy(client: TestClient, *product_ids: int, coupon_code: str | None = None):
    for product_id in product_ids:
        client.post("/cart/items", json={"product_id": product_id}, headers=auth_headers())
    return client.post("/checkout", json={"coupon_code": coupon_code}, headers=auth_headers())


class TestListOrders:
    def test_newest_first_with_products(self, test_client: TestClient, products):
        first = buy(test_client, products["Keyboard"], products["Mouse"]).json()["order"]
        second = buy(test_client, products["Cable"]).json()["order"]

        response = test_client.get("/orders", headers=auth_headers())

        assert response.status_code == 200
        orders = response.json()
        assert [o["id"] for o in orders] == [second["id"], first["id"]]
        assert orders[1]["products"] == ["Keyboard", "Mouse"]
        assert orders[1]["total_price"] == "249.49"
        assert orders[1]["status"] == "PENDING"
        assert orders[1]["coupon_code"] is None

    def test_discounted_order_shows_coupon(self, test_client: TestClient, products, coupon50):
        buy(test_client, products["Mouse"])
        buy(test_client, products["Mouse"])
        buy(test_client, products["Headphones"], coupon_code="offer50")

        latest = test_client.get("/orders", headers=auth_headers()).json()[0]

        assert latest["coupon_code"] == "offer50"
        assert latest["percentage_off"] == 50
        assert latest["subtotal"] == "100.00"
        assert latest["total_price"] == "50.00"

    def test_only_own_orders(self, test_client: TestClient, products):
        buy(test_client, products["Mouse"])

        response = test_client.get("/orders", headers=auth_headers("ola@example.com"))

        assert response.json() == []

    def test_without_identity_returns_401(self, test_client: TestClient):
        assert test_client.get("/orders").status_code == 401

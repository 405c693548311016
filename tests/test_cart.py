"""
Component tests for the cart endpoints.

Real FastAPI app, services and repositories on in-memory SQLite.
"""
from fastapi.testclient import TestClient

from storefront.data.database import SessionLocal
from storefront.repos.cart_repo import CartRepo
from tests.helpers import auth_headers, count_cart_items


class TestAddItem:
    def test_first_add_creates_item_with_quantity_one(self, test_client: TestClient, products):
        response = test_client.post(
            "/cart/items", json={"product_id": products["Keyboard"]}, headers=auth_headers()
        )

        assert response.status_code == 200
        data = response.json()
        assert data["product_id"] == products["Keyboard"]
        assert data["quantity"] == 1
        assert data["product"]["name"] == "Keyboard"
        assert data["product"]["price"] == "199.99"

    def test_repeated_adds_increment_quantity(self, test_client: TestClient, products):
        for _ in range(4):
            response = test_client.post(
                "/cart/items", json={"product_id": products["Mouse"]}, headers=auth_headers()
            )

        assert response.json()["quantity"] == 4

        cart = test_client.get("/cart", headers=auth_headers()).json()
        assert len(cart["items"]) == 1
        assert cart["items"][0]["quantity"] == 4
        assert cart["total"] == "198.00"

    def test_two_sessions_adding_same_new_product_end_with_quantity_two(self, test_client: TestClient, products, user):
        # dwa niezalezne requesty, zaden nie czyta ilosci przed zapisem
        first, second = SessionLocal(), SessionLocal()
        try:
            CartRepo(first).increment_item(user.id, products["Cable"])
            CartRepo(second).increment_item(user.id, products["Cable"])
            first.commit()
            second.commit()
        finally:
            first.close()
            second.close()

        cart = test_client.get("/cart", headers=auth_headers()).json()
        assert cart["items"][0]["quantity"] == 2

    def test_item_removed_right_after_add_still_returns_added_item(
        self, test_client: TestClient, products, user, monkeypatch
    ):
        commit = CartRepo.commit

        def commit_then_concurrent_remove(self):
            commit(self)
            # rownolegly DELETE /cart/items zaraz po commicie
            other = SessionLocal()
            try:
                CartRepo(other).delete_cart_item(user.id, products["Mouse"])
                other.commit()
            finally:
                other.close()

        monkeypatch.setattr(CartRepo, "commit", commit_then_concurrent_remove)

        response = test_client.post("/cart/items", json={"product_id": products["Mouse"]}, headers=auth_headers())

        assert response.status_code == 200
        assert response.json()["quantity"] == 1
        assert response.json()["product"]["name"] == "Mouse"

    def test_unknown_product_returns_404(self, test_client: TestClient, products, db):
        response = test_client.post("/cart/items", json={"product_id": 9999}, headers=auth_headers())

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"
        assert count_cart_items(db) == 0

    def test_missing_product_id_returns_400(self, test_client: TestClient, products):
        response = test_client.post("/cart/items", json={}, headers=auth_headers())

        assert response.status_code == 400

    def test_without_identity_returns_401(self, test_client: TestClient, products):
        response = test_client.post("/cart/items", json={"product_id": products["Mouse"]})

        assert response.status_code == 401


class TestRemoveItem:
    def test_removed_product_is_not_listed(self, test_client: TestClient, products):
        test_client.post("/cart/items", json={"product_id": products["Keyboard"]}, headers=auth_headers())
        test_client.post("/cart/items", json={"product_id": products["Mouse"]}, headers=auth_headers())

        response = test_client.delete(f"/cart/items/{products['Keyboard']}", headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == {"message": "Item removed from cart successfully"}

        cart = test_client.get("/cart", headers=auth_headers()).json()
        assert [i["product_id"] for i in cart["items"]] == [products["Mouse"]]
        assert cart["total"] == "49.50"

    def test_remove_missing_item_returns_404(self, test_client: TestClient, products):
        response = test_client.delete(f"/cart/items/{products['Keyboard']}", headers=auth_headers())

        assert response.status_code == 404
        assert response.json()["detail"] == "Cart item not found"

    def test_cannot_remove_other_users_item(self, test_client: TestClient, products):
        test_client.post(
            "/cart/items", json={"product_id": products["Keyboard"]}, headers=auth_headers("ola@example.com")
        )

        response = test_client.delete(f"/cart/items/{products['Keyboard']}", headers=auth_headers())

        assert response.status_code == 404
        other = test_client.get("/cart", headers=auth_headers("ola@example.com")).json()
        assert len(other["items"]) == 1


class TestListCart:
    def test_empty_cart(self, test_client: TestClient):
        response = test_client.get("/cart", headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == {"items": [], "total": "0.00"}

    def test_carts_are_per_user(self, test_client: TestClient, products):
        test_client.post("/cart/items", json={"product_id": products["Mouse"]}, headers=auth_headers())

        other = test_client.get("/cart", headers=auth_headers("ola@example.com")).json()

        assert other["items"] == []

    def test_without_identity_returns_401(self, test_client: TestClient):
        assert test_client.get("/cart").status_code == 401

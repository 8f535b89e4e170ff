"""Integration tests for the HTTP API via TestClient, backed by fakes."""

import pytest
from fastapi.testclient import TestClient

from storefront.domain.exceptions import StorageError
from storefront.domain.model.category import Category
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.api import dependencies
from storefront.infrastructure.api.app import create_app
from tests.fakes import (
    FakeCategoryRepository,
    FakeOrderRepository,
    FakeProductRepository,
    FakeUserRepository,
)


@pytest.fixture()
def repos():
    return {
        "users": FakeUserRepository([User(1, "Ada", "ada@example.com", "pw")]),
        "categories": FakeCategoryRepository([Category(1, "Kitchen")]),
        "products": FakeProductRepository([
            Product(1, "P1", "Mug", Money.of("9.99"), category_id=1),
            Product(2, "P2", "Spoon", Money.of("5.005"), category_id=1),
        ]),
        "orders": FakeOrderRepository(),
    }


@pytest.fixture()
def client(repos):
    app = create_app()
    app.dependency_overrides[dependencies.get_user_repo] = lambda: repos["users"]
    app.dependency_overrides[dependencies.get_category_repo] = lambda: repos["categories"]
    app.dependency_overrides[dependencies.get_product_repo] = lambda: repos["products"]
    app.dependency_overrides[dependencies.get_order_repo] = lambda: repos["orders"]
    return TestClient(app)


def _create_order(client, products=None):
    return client.post(
        "/orders",
        json={
            "userId": 1,
            "products": products or [
                {"productId": 1, "quantity": 2},
                {"productId": 2, "quantity": 3},
            ],
        },
    )


class TestOrderEndpoints:

    def test_create_order(self, client):
        response = _create_order(client)
        assert response.status_code == 201
        assert response.json() == {
            "id": 1,
            "userId": 1,
            "products": [
                {"productId": 1, "quantity": 2},
                {"productId": 2, "quantity": 3},
            ],
            "total": 35.01,
        }

    def test_caller_supplied_total_is_ignored(self, client):
        response = client.post(
            "/orders",
            json={"userId": 1, "products": [{"productId": 1, "quantity": 1}], "total": 0.01},
        )
        assert response.json()["total"] == 9.99

    def test_unknown_product_is_400_and_nothing_stored(self, client, repos):
        response = _create_order(client, [{"productId": 999, "quantity": 1}])
        assert response.status_code == 400
        assert response.json() == {"error": "Product with id 999 does not exist"}
        assert len(repos["orders"]) == 0

    def test_unknown_user_is_400(self, client):
        response = client.post("/orders", json={"userId": 42, "products": []})
        assert response.status_code == 400
        assert response.json() == {"error": "User does not exist"}

    def test_missing_field_is_400(self, client):
        response = client.post("/orders", json={"userId": 1})
        assert response.status_code == 400
        assert "products" in response.json()["error"]

    def test_malformed_body_is_400(self, client):
        response = client.post("/orders", json={"userId": "abc", "products": []})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")

    def test_non_positive_quantity_is_400(self, client):
        response = _create_order(client, [{"productId": 1, "quantity": 0}])
        assert response.status_code == 400

    def test_update_reprices(self, client):
        _create_order(client)
        response = client.put("/orders/1", json={"products": [{"productId": 1, "quantity": 3}]})
        assert response.status_code == 200
        assert response.json()["total"] == 29.97
        assert response.json()["userId"] == 1

    def test_update_user_only_keeps_total(self, client, repos):
        repos["users"].save(User(None, "Grace", "grace@example.com", "pw"))
        _create_order(client)
        response = client.put("/orders/1", json={"userId": 2})
        assert response.json()["userId"] == 2
        assert response.json()["total"] == 35.01

    def test_update_unknown_order_is_404(self, client):
        response = client.put("/orders/9", json={"userId": 1})
        assert response.status_code == 404
        assert response.json() == {"error": "Order #9 not found"}

    def test_list_show_delete(self, client):
        _create_order(client)
        assert [o["id"] for o in client.get("/orders").json()] == [1]
        assert client.get("/orders/1").json()["total"] == 35.01

        response = client.delete("/orders/1")
        assert response.json() == {"message": "Order deleted successfully"}
        assert client.get("/orders/1").status_code == 404
        assert client.delete("/orders/1").status_code == 404


class TestCatalogAndUserEndpoints:

    def test_create_user_hides_password(self, client):
        response = client.post(
            "/users", json={"name": "Linus", "email": "l@example.com", "password": "pw"}
        )
        assert response.status_code == 201
        assert response.json() == {"id": 2, "name": "Linus", "email": "l@example.com"}

    def test_create_user_requires_password(self, client):
        response = client.post("/users", json={"name": "Linus", "email": "l@example.com"})
        assert response.status_code == 400

    def test_update_and_delete_user(self, client):
        assert client.put("/users/1", json={"name": "Ada L."}).json()["name"] == "Ada L."
        assert client.delete("/users/1").json() == {"message": "User deleted successfully"}
        assert client.get("/users/1").status_code == 404

    def test_create_product_rounds_price(self, client):
        response = client.post(
            "/products",
            json={"name": "Bowl", "description": "Ceramic", "price": 5.005, "categoryId": 1},
        )
        assert response.status_code == 201
        assert response.json()["price"] == 5.01
        assert response.json()["categoryId"] == 1

    def test_create_product_unknown_category(self, client):
        response = client.post(
            "/products",
            json={"name": "Bowl", "description": "Ceramic", "price": 1, "categoryId": 7},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Category does not exist"}

    def test_list_products_by_category(self, client, repos):
        repos["products"].save(Product(None, "Rake", "Steel", Money.of("3"), category_id=2))
        assert [p["id"] for p in client.get("/products", params={"categoryId": 2}).json()] == [3]
        assert len(client.get("/products").json()) == 3

    def test_category_crud(self, client):
        assert client.post("/categories", json={"name": "Garden"}).status_code == 201
        assert client.put("/categories/2", json={"name": "Yard"}).json()["name"] == "Yard"
        assert client.delete("/categories/2").status_code == 200
        assert client.get("/categories/2").status_code == 404

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_error_bodies_are_documented(self, client):
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/orders/{order_id}"]["put"]["responses"]
        for status in ("400", "404", "500"):
            ref = responses[status]["content"]["application/json"]["schema"]["$ref"]
            assert ref.endswith("/ErrorResponse")
        assert schema["components"]["schemas"]["ErrorResponse"]["required"] == ["error"]


class TestStorageFailure:

    def test_storage_error_is_500(self, repos):
        class BrokenOrders(FakeOrderRepository):
            def list_all(self):
                raise StorageError("Cannot read orders.json: disk on fire")

        app = create_app()
        app.dependency_overrides[dependencies.get_order_repo] = lambda: BrokenOrders()
        response = TestClient(app).get("/orders")
        assert response.status_code == 500
        assert response.json() == {"error": "Cannot read orders.json: disk on fire"}

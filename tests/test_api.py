"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

from decimal import Decimal

from fastapi.testclient import TestClient

from product_console.db.models import Product
from product_console.services import ProductsManager


PRODUCT_PAYLOAD = {
    "product_code": "AB12C",
    "product_name": "TestProduct",
    "origin_country": "Bulgaria",
    "price": "1.25",
    "quantity": 100,
    "description": "Anything for description",
}


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check returns status and catalog stats."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["products"]["total"] == 0

    def test_readiness_check(self, client: TestClient):
        """Test readiness check."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_check(self, client: TestClient):
        """Test liveness check."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True

    def test_docs_served_outside_production(self, client: TestClient):
        """Test interactive docs are enabled in development."""
        assert client.get("/docs").status_code == 200


class TestProductEndpoints:
    """Tests for product CRUD endpoints."""

    def test_create_product(self, client: TestClient, fetch_product):
        """Test creating a product."""
        response = client.post("/api/v1/products", json=PRODUCT_PAYLOAD)
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["product"]["product_code"] == "AB12C"
        assert Decimal(data["product"]["price"]) == Decimal("1.25")
        assert fetch_product("AB12C") is not None

    def test_create_invalid_product(self, client: TestClient, fetch_product):
        """Test negative price is rejected with the error envelope."""
        response = client.post(
            "/api/v1/products", json={**PRODUCT_PAYLOAD, "price": "-1"}
        )
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Invalid product!"
        assert fetch_product("AB12C") is None

    def test_create_duplicate_product(
        self, client: TestClient, products_manager: ProductsManager, bulgarian_product: Product
    ):
        """Test duplicate codes conflict."""
        products_manager.add(bulgarian_product)
        response = client.post("/api/v1/products", json=PRODUCT_PAYLOAD)
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "PRODUCT_EXISTS"

    def test_list_products(
        self,
        client: TestClient,
        products_manager: ProductsManager,
        bulgarian_product: Product,
        german_product: Product,
    ):
        """Test listing all products."""
        products_manager.add(bulgarian_product)
        products_manager.add(german_product)

        response = client.get("/api/v1/products")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [p["product_code"] for p in data["products"]] == ["AB12C", "DB12C"]

    def test_list_products_empty(self, client: TestClient):
        """Test empty catalog returns 404."""
        response = client.get("/api/v1/products")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No product found."

    def test_search_by_country(
        self,
        client: TestClient,
        products_manager: ProductsManager,
        bulgarian_product: Product,
        german_product: Product,
    ):
        """Test searching by origin country."""
        products_manager.add(bulgarian_product)
        products_manager.add(german_product)

        response = client.get("/api/v1/products/search", params={"country": "Germany"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["products"][0]["origin_country"] == "Germany"

    def test_search_blank_country(self, client: TestClient):
        """Test blank country returns 400."""
        response = client.get("/api/v1/products/search", params={"country": "  "})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_ARGUMENT"
        assert error["message"] == "Country name cannot be empty."

    def test_get_product(
        self, client: TestClient, products_manager: ProductsManager, german_product: Product
    ):
        """Test getting a product by code."""
        products_manager.add(german_product)

        response = client.get("/api/v1/products/DB12C")
        assert response.status_code == 200
        assert response.json()["product"]["product_name"] == "TestProduct"

    def test_get_unknown_product(self, client: TestClient):
        """Test unknown code returns 404."""
        response = client.get("/api/v1/products/notCode")
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["message"] == "No product found with product code: notCode"
        assert error["details"] == {"product_code": "notCode"}

    def test_update_product(
        self,
        client: TestClient,
        products_manager: ProductsManager,
        german_product: Product,
        fetch_product,
    ):
        """Test replacing a product's attributes."""
        products_manager.add(german_product)
        payload = {key: value for key, value in PRODUCT_PAYLOAD.items() if key != "product_code"}
        payload["product_name"] = "Update_Name"

        response = client.put("/api/v1/products/DB12C", json=payload)
        assert response.status_code == 200
        assert response.json()["product"]["product_name"] == "Update_Name"
        assert fetch_product("DB12C").product_name == "Update_Name"

    def test_update_invalid_product(
        self, client: TestClient, products_manager: ProductsManager, german_product: Product
    ):
        """Test invalid update returns 422."""
        products_manager.add(german_product)
        payload = {key: value for key, value in PRODUCT_PAYLOAD.items() if key != "product_code"}
        payload["quantity"] = -1

        response = client.put("/api/v1/products/DB12C", json=payload)
        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Invalid prduct!"

    def test_update_unknown_product(self, client: TestClient):
        """Test updating a missing product returns 404."""
        payload = {key: value for key, value in PRODUCT_PAYLOAD.items() if key != "product_code"}
        response = client.put("/api/v1/products/ZZ99Z", json=payload)
        assert response.status_code == 404

    def test_delete_product(
        self,
        client: TestClient,
        products_manager: ProductsManager,
        german_product: Product,
        fetch_product,
    ):
        """Test deleting a product."""
        products_manager.add(german_product)

        response = client.delete("/api/v1/products/DB12C")
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert fetch_product("DB12C") is None

    def test_delete_unknown_product(self, client: TestClient):
        """Test deleting a missing product still succeeds."""
        response = client.delete("/api/v1/products/ZZ99Z")
        assert response.status_code == 200

    def test_delete_blank_code(self, client: TestClient):
        """Test whitespace code returns 400."""
        response = client.delete("/api/v1/products/%20%20")
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Product code cannot be empty."

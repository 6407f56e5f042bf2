"""Integration tests for Category API endpoints.

Covers:
- CRUD operations via /categories.
- Domain exception mapping (422, 404, 409).
- Error body keys (``error`` vs ``message`` on delete).
"""

from __future__ import annotations

import pytest

from modules.categories.models import Category

pytestmark = pytest.mark.integration


# ===========================================================================
# CREATE
# ===========================================================================


class TestCategoryCreate:
    def test_create_success(self, api_client):
        response = api_client.post("/categories", {"name": "Electronics"}, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Category created successfully"
        assert body["category"]["name"] == "Electronics"
        assert set(body["category"]) == {"id", "name", "createdAt", "updatedAt"}
        assert Category.objects.filter(name="Electronics").exists()

    def test_trailing_slash_accepted(self, api_client):
        response = api_client.post("/categories/", {"name": "Books"}, format="json")
        assert response.status_code == 201

    @pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": None}])
    def test_missing_name_returns_422(self, api_client, payload):
        response = api_client.post("/categories", payload, format="json")

        assert response.status_code == 422
        assert response.json() == {"error": "Category name is required"}
        assert Category.objects.count() == 0

    def test_duplicate_returns_409(self, api_client):
        first = api_client.post("/categories", {"name": "Electronics"}, format="json")
        second = api_client.post("/categories", {"name": "Electronics"}, format="json")

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"error": "Category already exists"}
        assert Category.objects.count() == 1


# ===========================================================================
# LIST
# ===========================================================================


class TestCategoryList:
    def test_list_empty(self, api_client):
        response = api_client.get("/categories")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Categories fetched successfully",
            "categories": [],
            "count": 0,
        }

    def test_list_ordered_by_name(self, api_client, make_category):
        make_category("Home")
        make_category("Books")
        make_category("Electronics")

        response = api_client.get("/categories")

        body = response.json()
        assert body["count"] == 3
        assert [c["name"] for c in body["categories"]] == ["Books", "Electronics", "Home"]

    def test_list_is_stable(self, api_client, make_category):
        make_category("Home")
        make_category("Books")

        first = api_client.get("/categories").json()
        second = api_client.get("/categories").json()

        assert first == second


# ===========================================================================
# UPDATE
# ===========================================================================


class TestCategoryUpdate:
    def test_update_success(self, api_client, make_category):
        category = make_category("Electronics")

        response = api_client.put(
            f"/categories/{category.id}", {"name": "Gadgets"}, format="json"
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Category updated successfully"
        assert body["category"]["id"] == category.id
        assert body["category"]["name"] == "Gadgets"
        category.refresh_from_db()
        assert category.name == "Gadgets"

    def test_update_without_name_keeps_it(self, api_client, make_category):
        category = make_category("Electronics")

        response = api_client.put(f"/categories/{category.id}", {}, format="json")

        assert response.status_code == 200
        assert response.json()["category"]["name"] == "Electronics"

    def test_update_not_found(self, api_client):
        response = api_client.put("/categories/99999", {"name": "X"}, format="json")

        assert response.status_code == 404
        assert response.json() == {"error": "Category not found"}

    def test_update_malformed_id_is_not_found(self, api_client):
        response = api_client.put("/categories/abc", {"name": "X"}, format="json")

        assert response.status_code == 404
        assert response.json() == {"error": "Category not found"}

    def test_update_to_taken_name_is_storage_error(self, api_client, make_category):
        make_category("Books")
        category = make_category("Electronics")

        response = api_client.put(
            f"/categories/{category.id}", {"name": "Books"}, format="json"
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        category.refresh_from_db()
        assert category.name == "Electronics"


# ===========================================================================
# DELETE
# ===========================================================================


class TestCategoryDelete:
    def test_delete_success(self, api_client, make_category):
        category = make_category("Electronics")

        response = api_client.delete(f"/categories/{category.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Category deleted successfully"
        assert body["category"]["id"] == category.id
        assert body["category"]["name"] == "Electronics"
        assert not Category.objects.filter(id=category.id).exists()

    def test_delete_not_found_uses_message_key(self, api_client):
        response = api_client.delete("/categories/99999")

        assert response.status_code == 404
        assert response.json() == {"message": "Category not found"}

    def test_delete_in_use_returns_409(self, api_client, make_product):
        product = make_product()

        response = api_client.delete(f"/categories/{product.category_id}")

        assert response.status_code == 409
        assert response.json() == {"message": "Category id being used in 1 product(s)"}

        listed = api_client.get("/categories").json()
        assert [c["id"] for c in listed["categories"]] == [product.category_id]

    def test_delete_reports_product_count(self, api_client, make_category, make_product):
        category = make_category("Electronics")
        make_product(name="Phone", category=category)
        make_product(name="Camera", category=category)

        response = api_client.delete(f"/categories/{category.id}")

        assert response.status_code == 409
        assert response.json() == {"message": "Category id being used in 2 product(s)"}

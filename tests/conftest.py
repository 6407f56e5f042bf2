import pytest

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_category():
    """Factory persisting a Category."""

    def _make(name: str = "Electronics") -> Category:
        return Category.objects.create(name=name)

    return _make


@pytest.fixture()
def make_product(make_category):
    """Factory persisting a Product (creates a category when none is given)."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Smartphone",
            "description": "Latest model smartphone",
            "price": 699.99,
            "currency": "USD",
            "quantity": 50,
            "active": True,
        }
        defaults.update(overrides)
        if "category" not in defaults:
            defaults["category"] = make_category()
        return Product.objects.create(**defaults)

    return _make

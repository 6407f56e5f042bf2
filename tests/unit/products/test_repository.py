"""Unit tests for ProductDjangoRepository.

Covers:
- CRUD operations (get_by_id, list, save, delete).
- Product-specific queries (get_by_name, list_by_category, count_by_category).
- Edge cases (malformed ids).
"""

from __future__ import annotations

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# get_by_id / get_by_name
# ===========================================================================


class TestGetById:
    def test_existing(self, repo, make_product):
        product = make_product()
        found = repo.get_by_id(product.id)
        assert found == product
        assert found.category.name == "Electronics"

    def test_missing_returns_none(self, repo):
        assert repo.get_by_id(99999) is None

    def test_malformed_returns_none(self, repo):
        assert repo.get_by_id("xyz") is None


class TestGetByName:
    def test_found(self, repo, make_product):
        product = make_product(name="Laptop")
        assert repo.get_by_name("Laptop") == product

    def test_case_sensitive(self, repo, make_product):
        make_product(name="Laptop")
        assert repo.get_by_name("laptop") is None

    def test_exclude_id(self, repo, make_product):
        product = make_product(name="Laptop")
        assert repo.get_by_name("Laptop", exclude_id=product.id) is None


# ===========================================================================
# list queries
# ===========================================================================


class TestList:
    def test_ordered_by_id(self, repo, make_category, make_product):
        category = make_category()
        first = make_product(name="Zeta", category=category)
        second = make_product(name="Alpha", category=category)

        assert [p.id for p in repo.list()] == [first.id, second.id]

    def test_includes_inactive(self, repo, make_category, make_product):
        category = make_category()
        make_product(name="Laptop", category=category, active=False)
        make_product(name="Phone", category=category)

        assert [p.name for p in repo.list()] == ["Laptop", "Phone"]

    def test_list_by_category_ordered_by_name(self, repo, make_category, make_product):
        electronics = make_category("Electronics")
        books = make_category("Books")
        make_product(name="Phone", category=electronics)
        make_product(name="Camera", category=electronics)
        make_product(name="Novel", category=books)

        result = repo.list_by_category(electronics.id)
        assert [p.name for p in result] == ["Camera", "Phone"]

    def test_count_by_category(self, repo, make_category, make_product):
        electronics = make_category("Electronics")
        make_product(name="Phone", category=electronics)
        make_product(name="Camera", category=electronics)

        assert repo.count_by_category(electronics.id) == 2
        assert repo.count_by_category(99999) == 0


# ===========================================================================
# save / delete
# ===========================================================================


class TestSave:
    def test_create(self, repo, make_category):
        product = repo.save(
            Product(name="Tablet", price=300, category=make_category())
        )
        product.refresh_from_db()

        assert product.id is not None
        assert product.currency == "USD"
        assert product.quantity == 0
        assert product.active is True

    def test_update(self, repo, make_product):
        product = make_product()
        product.quantity = 7
        repo.save(product)
        product.refresh_from_db()

        assert product.quantity == 7


class TestDelete:
    def test_delete_existing(self, repo, make_product):
        product = make_product()

        assert repo.delete(product.id) is True
        assert not Product.objects.filter(id=product.id).exists()

    def test_delete_missing(self, repo):
        assert repo.delete(99999) is False

    def test_delete_malformed(self, repo):
        assert repo.delete("abc") is False

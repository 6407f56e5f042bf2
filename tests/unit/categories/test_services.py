"""Unit tests for CategoryService.

Covers:
- create_category: happy path, duplicate name.
- list_categories: delegation to repository.
- update_category: happy path, missing id, not found, absent name.
- delete_category: happy path, missing id, not found, category in use.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
from modules.categories.exceptions import (
    CategoryAlreadyExists,
    CategoryInUse,
    CategoryNotFound,
    InvalidCategoryData,
)
from modules.categories.models import Category
from modules.categories.services import CategoryService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def mock_product_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo, mock_product_repo):
    return CategoryService(repository=mock_repo, product_repository=mock_product_repo)


# ===========================================================================
# create_category
# ===========================================================================


class TestCreateCategory:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        mock_repo.save.side_effect = lambda c: c

        category = service.create_category(CreateCategoryDTO(name="Electronics"))

        assert category.name == "Electronics"
        mock_repo.get_by_name.assert_called_once_with("Electronics")
        mock_repo.save.assert_called_once()

    def test_duplicate_name_raises(self, service, mock_repo):
        mock_repo.get_by_name.return_value = Category(id=1, name="Electronics")

        with pytest.raises(CategoryAlreadyExists, match="Category already exists"):
            service.create_category(CreateCategoryDTO(name="Electronics"))

        mock_repo.save.assert_not_called()


# ===========================================================================
# list_categories
# ===========================================================================


class TestListCategories:
    def test_delegates_to_repo(self, service, mock_repo):
        categories = [Category(id=2, name="Books"), Category(id=1, name="Electronics")]
        mock_repo.list.return_value = categories

        assert service.list_categories() == categories
        mock_repo.list.assert_called_once_with()


# ===========================================================================
# update_category
# ===========================================================================


class TestUpdateCategory:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = Category(id=1, name="Electronics")
        mock_repo.save.side_effect = lambda c: c

        category = service.update_category("1", UpdateCategoryDTO(name="Gadgets"))

        assert category.name == "Gadgets"
        mock_repo.get_by_id.assert_called_once_with("1")

    @pytest.mark.parametrize("missing_id", [None, ""])
    def test_missing_id_raises(self, service, mock_repo, missing_id):
        with pytest.raises(InvalidCategoryData, match="Category ID is required"):
            service.update_category(missing_id, UpdateCategoryDTO(name="Gadgets"))

        mock_repo.get_by_id.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CategoryNotFound, match="Category not found"):
            service.update_category("99", UpdateCategoryDTO(name="Gadgets"))

        mock_repo.save.assert_not_called()

    def test_absent_name_keeps_current_name(self, service, mock_repo):
        mock_repo.get_by_id.return_value = Category(id=1, name="Electronics")
        mock_repo.save.side_effect = lambda c: c

        category = service.update_category("1", UpdateCategoryDTO())

        assert category.name == "Electronics"

    def test_name_is_not_revalidated(self, service, mock_repo):
        mock_repo.get_by_id.return_value = Category(id=1, name="Electronics")
        mock_repo.save.side_effect = lambda c: c

        category = service.update_category("1", UpdateCategoryDTO(name=""))

        assert category.name == ""


# ===========================================================================
# delete_category
# ===========================================================================


class TestDeleteCategory:
    def test_success(self, service, mock_repo, mock_product_repo):
        existing = Category(id=1, name="Electronics")
        mock_repo.get_by_id.return_value = existing
        mock_product_repo.count_by_category.return_value = 0

        deleted = service.delete_category("1")

        assert deleted is existing
        mock_product_repo.count_by_category.assert_called_once_with(1)
        mock_repo.delete.assert_called_once_with(1)

    def test_missing_id_raises(self, service, mock_repo):
        with pytest.raises(InvalidCategoryData, match="Category ID is required"):
            service.delete_category(None)

    def test_not_found_raises(self, service, mock_repo, mock_product_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CategoryNotFound):
            service.delete_category("99")

        mock_product_repo.count_by_category.assert_not_called()
        mock_repo.delete.assert_not_called()

    def test_in_use_raises_with_count(self, service, mock_repo, mock_product_repo):
        mock_repo.get_by_id.return_value = Category(id=1, name="Electronics")
        mock_product_repo.count_by_category.return_value = 3

        with pytest.raises(CategoryInUse) as exc_info:
            service.delete_category("1")

        assert exc_info.value.product_count == 3
        assert str(exc_info.value) == "Category id being used in 3 product(s)"
        mock_repo.delete.assert_not_called()

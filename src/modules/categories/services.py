"""Category service layer (Use Cases).

Orchestrates business logic for the Category aggregate, delegating
persistence to the injected ``ICategoryRepository``.  The product
repository is injected as well: deleting a category first counts the
products that still reference it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.categories.exceptions import (
    CategoryAlreadyExists,
    CategoryInUse,
    CategoryNotFound,
    InvalidCategoryData,
)
from modules.categories.models import Category

if TYPE_CHECKING:
    from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.core.repositories.interfaces import EntityId
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category use-cases."""

    def __init__(
        self,
        repository: ICategoryRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._products = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_category(self, dto: CreateCategoryDTO) -> Category:
        """Create a category with a unique name.

        Raises:
            CategoryAlreadyExists: if the name is taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("category.duplicate_name")
            raise CategoryAlreadyExists("Category already exists")

        category = self._repo.save(Category(name=dto.name))
        log.info("category.created", category_id=category.id)
        return category

    @transaction.atomic
    def update_category(
        self, id: Optional[EntityId], dto: UpdateCategoryDTO
    ) -> Category:
        """Rename a category.

        The name is not re-validated: whatever the caller sent is stored.

        Raises:
            InvalidCategoryData: if ``id`` is missing.
            CategoryNotFound: if the category does not exist.
        """
        if not id:
            raise InvalidCategoryData("Category ID is required")

        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound("Category not found")

        if dto.has_name:
            category.name = dto.name

        category = self._repo.save(category)
        logger.info("category.updated", category_id=category.id)
        return category

    @transaction.atomic
    def delete_category(self, id: Optional[EntityId]) -> Category:
        """Delete a category that no product references.

        Returns the deleted record.

        Raises:
            InvalidCategoryData: if ``id`` is missing.
            CategoryNotFound: if the category does not exist.
            CategoryInUse: if products still reference it.
        """
        if not id:
            raise InvalidCategoryData("Category ID is required")

        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound("Category not found")

        log = logger.bind(category_id=category.id)

        product_count = self._products.count_by_category(category.id)
        if product_count:
            log.warning("category.delete_blocked", product_count=product_count)
            raise CategoryInUse(product_count)

        self._repo.delete(category.id)
        log.info("category.deleted")
        return category

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_categories(self) -> List[Category]:
        """Return every category ordered by name."""
        return self._repo.list()

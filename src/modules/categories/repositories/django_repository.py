"""Django ORM implementation of the Category repository.

Error handling follows the Null Object pattern: look-ups return ``None``
for unknown or malformed ids instead of raising, and the Service Layer
decides how a missing entity translates into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository
from modules.core.repositories.interfaces import EntityId

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    def get_by_id(self, id: EntityId) -> Optional[Category]:
        try:
            return Category.objects.filter(id=id).first()
        except (TypeError, ValueError, ValidationError):
            return None

    def get_by_name(self, name: str) -> Optional[Category]:
        return Category.objects.filter(name=name).first()

    def list(self) -> List[Category]:
        """List categories ordered by name."""
        return list(Category.objects.order_by("name"))

    @transaction.atomic
    def save(self, entity: Category) -> Category:
        entity.save()
        logger.info("category.saved", category_id=entity.id, name=entity.name)
        return entity

    @transaction.atomic
    def delete(self, id: EntityId) -> bool:
        """Delete a category by ID.

        Returns ``False`` when no category matches.  Referencing products
        make the storage raise ``ProtectedError``.
        """
        try:
            deleted, _ = Category.objects.filter(id=id).delete()
        except (TypeError, ValueError, ValidationError):
            return False
        if deleted:
            logger.info("category.deleted", category_id=id)
        return bool(deleted)

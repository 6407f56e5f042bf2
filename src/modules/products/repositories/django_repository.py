"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.

Every read joins the category (``select_related``) because responses
embed its ``{id, name}``.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.core.repositories.interfaces import EntityId
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _queryset(self):
        return Product.objects.select_related("category")

    def get_by_id(self, id: EntityId) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return self._queryset().filter(id=id).first()
        except (TypeError, ValueError, ValidationError):
            return None

    def get_by_name(
        self, name: str, exclude_id: Optional[EntityId] = None
    ) -> Optional[Product]:
        queryset = Product.objects.filter(name=name)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.first()

    def list(self) -> List[Product]:
        """List products in insertion order (by id)."""
        return list(self._queryset().order_by("id"))

    def list_by_category(self, category_id: EntityId) -> List[Product]:
        return list(self._queryset().filter(category_id=category_id).order_by("name"))

    def count_by_category(self, category_id: EntityId) -> int:
        return Product.objects.filter(category_id=category_id).count()

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.id,
            name=entity.name,
        )
        return entity

    @transaction.atomic
    def delete(self, id: EntityId) -> bool:
        """Delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.  Instances fetched earlier keep their
        field values, so callers can still render them.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (TypeError, ValueError, ValidationError):
            return False
        if deleted:
            logger.info("product.deleted", product_id=id)
        return bool(deleted)

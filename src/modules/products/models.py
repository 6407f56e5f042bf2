"""Product model.

Business rules reflected in the schema:
- ``name`` is unique across all products.
- Every product belongs to exactly one category; a referenced category
  cannot be deleted (``on_delete=PROTECT``).

Price and quantity rules depend on the operation (create vs update) and
are enforced by the DTOs and the Service Layer, not by constraints here.
"""

from __future__ import annotations

import structlog

from django.db import models

from modules.categories.models import Category

logger = structlog.get_logger(__name__)


class Product(models.Model):
    """Sellable item with pricing and inventory attributes."""

    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    price = models.FloatField()
    currency = models.CharField(max_length=16, default="USD")
    quantity = models.IntegerField(default=0)
    active = models.BooleanField(default=True)
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["category", "name"], name="products_category_name_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=self.id,
                name=self.name,
                category_id=self.category_id,
            )

    def __str__(self) -> str:
        return self.name

"""Category model.

A named grouping that products reference.  ``name`` is unique; a
category cannot be removed while products still point at it (guarded
by the service layer and by ``on_delete=PROTECT`` on ``Product.category``).
"""

from __future__ import annotations

import structlog

from django.db import models

from modules.core.models import TimestampedModel

logger = structlog.get_logger(__name__)


class Category(TimestampedModel):
    name = models.CharField(max_length=255, unique=True)

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info("category_created", category_id=self.id, name=self.name)

    def __str__(self) -> str:
        return self.name

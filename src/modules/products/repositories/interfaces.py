"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups required by the
unique-name rule, the category listing and the category deletion guard.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import EntityId, IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_name(
        self, name: str, exclude_id: Optional[EntityId] = None
    ) -> Optional["Product"]:
        """Retrieve a product by exact name, optionally ignoring one id."""

    @abstractmethod
    def list_by_category(self, category_id: EntityId) -> List["Product"]:
        """List the products of one category ordered by name."""

    @abstractmethod
    def count_by_category(self, category_id: EntityId) -> int:
        """Count the products that reference a category."""

"""Category domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import Conflict, NotFound, ValidationFailed


class InvalidCategoryData(ValidationFailed):
    """Required category input (id or name) is missing."""


class CategoryAlreadyExists(Conflict):
    """A category with the same name already exists."""


class CategoryNotFound(NotFound):
    """The requested category does not exist."""


class CategoryInUse(Conflict):
    """The category is still referenced by at least one product."""

    def __init__(self, product_count: int) -> None:
        self.product_count = product_count
        super().__init__(f"Category id being used in {product_count} product(s)")

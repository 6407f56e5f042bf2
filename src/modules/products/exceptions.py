"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import Conflict, NotFound, ValidationFailed


class InvalidProductData(ValidationFailed):
    """Required product input (id or name) is missing or blank."""


class ProductAlreadyExists(Conflict):
    """A product with the same name already exists (create)."""


class ProductNameConflict(Conflict):
    """Another product already uses the requested name (update)."""


class ProductNotFound(NotFound):
    """The requested product does not exist."""


class CategoryDoesNotExist(NotFound):
    """The ``categoryId`` sent with a product does not resolve."""


class InvalidCategoryReference(ValidationFailed):
    """The category used to filter products is missing or unknown."""

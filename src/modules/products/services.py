"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository`` and category look-ups
to the injected ``ICategoryRepository``.

Business rules enforced here:
- Product names are unique.
- Every write must reference an existing category.
- Updates check, in order: category, id, name, existence, name conflict.
  ``categoryId`` is therefore mandatory on every update.
- Price/quantity input rules are validated by the DTOs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import (
    CategoryDoesNotExist,
    InvalidCategoryReference,
    InvalidProductData,
    ProductAlreadyExists,
    ProductNameConflict,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.core.repositories.interfaces import EntityId
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives both repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = repository
        self._categories = category_repository

    def _resolve_category(self, category_id: Optional[EntityId]) -> Category:
        category = None
        if category_id is not None:
            category = self._categories.get_by_id(category_id)
        if category is None:
            raise CategoryDoesNotExist("Category does not exist")
        return category

    def _get_existing(self, id: Optional[EntityId]) -> Product:
        if not id:
            raise InvalidProductData("Product id is required")
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound("Product not found")
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a product in an existing category.

        Raises:
            CategoryDoesNotExist: if ``categoryId`` does not resolve.
            ProductAlreadyExists: if the name is taken.
        """
        log = logger.bind(name=dto.name)

        category = self._resolve_category(dto.category_id)

        if self._repo.get_by_name(dto.name):
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists("Product already exists")

        product = Product(
            name=dto.name,
            price=dto.price,
            category=category,
            **dto.optional_fields(),
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=product.id, category_id=category.id)
        return product

    @transaction.atomic
    def update_product(self, id: Optional[EntityId], dto: UpdateProductDTO) -> Product:
        """Partially update a product with the fields present in ``dto``.

        ``name`` is validated and checked for conflicts but not written.

        Raises:
            CategoryDoesNotExist: if ``categoryId`` is missing or unknown.
            InvalidProductData: if ``id`` or ``name`` is missing.
            ProductNotFound: if the product does not exist.
            ProductNameConflict: if another product already has ``name``.
        """
        category = self._resolve_category(dto.category_id)

        if not id:
            raise InvalidProductData("Product id is required")
        if dto.name is None or not dto.name.strip():
            raise InvalidProductData("Product name is required")

        product = self._get_existing(id)
        log = logger.bind(product_id=product.id)

        if self._repo.get_by_name(dto.name, exclude_id=product.id):
            log.warning("product.name_conflict", name=dto.name)
            raise ProductNameConflict("Product name already exists")

        changes: Dict[str, Any] = dto.changes()
        for field, value in changes.items():
            if field == "category_id":
                product.category = category
            else:
                setattr(product, field, value)

        product = self._repo.save(product)
        log.info("product.updated", fields=sorted(changes))
        return product

    @transaction.atomic
    def delete_product(self, id: Optional[EntityId]) -> Product:
        """Delete a product and return it as it was.

        Raises:
            InvalidProductData: if ``id`` is missing.
            ProductNotFound: if the product does not exist.
        """
        product = self._get_existing(id)
        self._repo.delete(product.id)
        logger.info("product.deleted", product_id=product.id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product ordered by id."""
        return self._repo.list()

    def get_product(self, id: Optional[EntityId]) -> Product:
        """Retrieve a single product by ID.

        Raises:
            InvalidProductData: if ``id`` is missing.
            ProductNotFound: if the product does not exist.
        """
        product = self._get_existing(id)
        logger.info("product.retrieved", product_id=product.id)
        return product

    def list_products_by_category(self, category_id: Optional[EntityId]) -> List[Product]:
        """Return the products of one category ordered by name.

        Raises:
            InvalidCategoryReference: if the id is missing, blank or unknown.
        """
        if (
            not category_id
            or not str(category_id).strip()
            or self._categories.get_by_id(category_id) is None
        ):
            raise InvalidCategoryReference("Category id is required or not found")
        return self._repo.list_by_category(category_id)

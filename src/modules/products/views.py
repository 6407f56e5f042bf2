"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into responses; anything
unexpected is left to ``modules.core.exceptions.catalog_exception_handler``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.core.exceptions import CatalogError, error_response, invalid_input_response
from modules.products.docs import product_docs
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNameConflict
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


@product_docs
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    The service can be injected with ``ProductViewSet.as_view(actions,
    service=...)``; by default it is wired to the Django repositories.
    """

    service: Optional[ProductService] = None
    # Actions whose error bodies are keyed "message" instead of "error".
    message_key_actions = ("by_category",)

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = ProductService(
                repository=ProductDjangoRepository(),
                category_repository=CategoryDjangoRepository(),
            )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self.service.list_products()
        return Response(
            {
                "message": "Products fetched successfully",
                "products": ProductSerializer(products, many=True).data,
                "count": len(products),
            }
        )

    def retrieve(self, request: Request, pk: Optional[str] = None) -> Response:
        """GET /products/{pk}"""
        try:
            product = self.service.get_product(pk)
        except CatalogError as exc:
            return error_response(exc)

        return Response(
            {
                "message": "Product fetched successfully",
                "product": ProductSerializer(product).data,
            }
        )

    @action(detail=False, methods=["get"], url_path=r"category/(?P<category_id>[^/]+)")
    def by_category(self, request: Request, category_id: Optional[str] = None) -> Response:
        """GET /products/category/{category_id}"""
        try:
            products = self.service.list_products_by_category(category_id)
        except CatalogError as exc:
            return error_response(exc, key="message")

        return Response(
            {
                "message": "Products fetched successfully by categoryId",
                "products": ProductSerializer(products, many=True).data,
                "count": len(products),
            }
        )

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return invalid_input_response(exc)

        try:
            product = self.service.create_product(dto)
        except CatalogError as exc:
            return error_response(exc)

        return Response(
            {
                "message": "Product created successfully",
                "product": ProductSerializer(product).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: Optional[str] = None) -> Response:
        """PUT /products/{pk}"""
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return invalid_input_response(exc)

        try:
            product = self.service.update_product(pk, dto)
        except ProductNameConflict as exc:
            return error_response(exc, key="message")
        except CatalogError as exc:
            return error_response(exc)

        return Response(
            {
                "message": "Product updated successfully",
                "product": ProductSerializer(product).data,
            }
        )

    def destroy(self, request: Request, pk: Optional[str] = None) -> Response:
        """DELETE /products/{pk}"""
        try:
            product = self.service.delete_product(pk)
        except CatalogError as exc:
            return error_response(exc)

        return Response(
            {
                "message": "Product successfully deleted",
                "product": ProductSerializer(product).data,
            }
        )

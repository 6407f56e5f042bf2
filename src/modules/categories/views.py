"""Category API views.

Exposes the ``CategoryService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into responses; anything
unexpected is left to ``modules.core.exceptions.catalog_exception_handler``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.docs import category_docs
from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.serializers import CategorySerializer
from modules.categories.services import CategoryService
from modules.core.exceptions import CatalogError, error_response, invalid_input_response
from modules.products.repositories.django_repository import ProductDjangoRepository


@category_docs
class CategoryViewSet(ViewSet):
    """ViewSet for Category CRUD operations.

    The service can be injected with ``CategoryViewSet.as_view(actions,
    service=...)``; by default it is wired to the Django repositories.
    """

    service: Optional[CategoryService] = None
    # Actions whose error bodies are keyed "message" instead of "error".
    message_key_actions = ("destroy",)

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = CategoryService(
                repository=CategoryDjangoRepository(),
                product_repository=ProductDjangoRepository(),
            )

    def create(self, request: Request) -> Response:
        """POST /categories"""
        try:
            dto = CreateCategoryDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return invalid_input_response(exc)

        try:
            category = self.service.create_category(dto)
        except CatalogError as exc:
            return error_response(exc)

        return Response(
            {
                "message": "Category created successfully",
                "category": CategorySerializer(category).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def list(self, request: Request) -> Response:
        """GET /categories"""
        categories = self.service.list_categories()
        return Response(
            {
                "message": "Categories fetched successfully",
                "categories": CategorySerializer(categories, many=True).data,
                "count": len(categories),
            }
        )

    def update(self, request: Request, pk: Optional[str] = None) -> Response:
        """PUT /categories/{pk}"""
        try:
            dto = UpdateCategoryDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return invalid_input_response(exc)

        try:
            category = self.service.update_category(pk, dto)
        except CatalogError as exc:
            return error_response(exc)

        return Response(
            {
                "message": "Category updated successfully",
                "category": CategorySerializer(category).data,
            }
        )

    def destroy(self, request: Request, pk: Optional[str] = None) -> Response:
        """DELETE /categories/{pk}"""
        try:
            category = self.service.delete_category(pk)
        except CatalogError as exc:
            return error_response(exc, key="message")

        return Response(
            {
                "message": "Category deleted successfully",
                "category": CategorySerializer(category).data,
            }
        )

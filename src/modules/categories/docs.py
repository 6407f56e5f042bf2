"""OpenAPI documentation for the Category endpoints.

Declarative only: ``category_docs`` is applied to ``CategoryViewSet`` as a
class decorator and consumed by drf-spectacular.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiExample,
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from rest_framework import serializers

from modules.categories.serializers import CategorySerializer
from modules.core.docs import error, internal_error

TAGS = ["Categories"]

CategoryInput = inline_serializer(
    name="CategoryInput",
    fields={"name": serializers.CharField()},
)

CategoryEnvelope = inline_serializer(
    name="CategoryEnvelope",
    fields={
        "message": serializers.CharField(),
        "category": CategorySerializer(),
    },
)

CategoryListEnvelope = inline_serializer(
    name="CategoryListEnvelope",
    fields={
        "message": serializers.CharField(),
        "categories": CategorySerializer(many=True),
        "count": serializers.IntegerField(),
    },
)

ID_PARAMETER = OpenApiParameter(
    name="id",
    type=int,
    location=OpenApiParameter.PATH,
    description="The category ID",
)

category_docs = extend_schema_view(
    create=extend_schema(
        summary="Create a new category",
        tags=TAGS,
        request=CategoryInput,
        examples=[
            OpenApiExample("Electronics", value={"name": "Electronics"}, request_only=True)
        ],
        responses={
            201: OpenApiResponse(CategoryEnvelope, description="Category created successfully"),
            409: error("Category already exists", "Category already exists"),
            422: error("Category name is required", "Category name is required"),
            500: internal_error(),
        },
    ),
    list=extend_schema(
        summary="List all categories ordered by name",
        tags=TAGS,
        responses={
            200: OpenApiResponse(CategoryListEnvelope, description="Categories fetched successfully"),
            500: internal_error(),
        },
    ),
    update=extend_schema(
        summary="Update a category name",
        tags=TAGS,
        parameters=[ID_PARAMETER],
        request=CategoryInput,
        responses={
            200: OpenApiResponse(CategoryEnvelope, description="Category updated successfully"),
            404: error("Category not found", "Category not found"),
            422: error("Category ID is required", "Category ID is required"),
            500: internal_error(),
        },
    ),
    destroy=extend_schema(
        summary="Delete a category that no product uses",
        tags=TAGS,
        parameters=[ID_PARAMETER],
        responses={
            200: OpenApiResponse(CategoryEnvelope, description="Category deleted successfully"),
            404: error("Category not found", "Category not found", key="message"),
            409: error(
                "Category still referenced by products",
                "Category id being used in 1 product(s)",
                key="message",
            ),
            422: error("Category ID is required", "Category ID is required", key="message"),
            500: internal_error(key="message"),
        },
    ),
)

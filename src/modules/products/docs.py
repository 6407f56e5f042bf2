"""OpenAPI documentation for the Product endpoints.

Declarative only: ``product_docs`` is applied to ``ProductViewSet`` as a
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

from modules.core.docs import error, internal_error
from modules.products.serializers import ProductSerializer

TAGS = ["Products"]

_INPUT_FIELDS = {
    "name": serializers.CharField(),
    "description": serializers.CharField(required=False, allow_null=True),
    "price": serializers.FloatField(),
    "currency": serializers.CharField(required=False),
    "quantity": serializers.IntegerField(required=False),
    "active": serializers.BooleanField(required=False),
    "categoryId": serializers.IntegerField(),
}

ProductCreateInput = inline_serializer(name="ProductCreateInput", fields=_INPUT_FIELDS)

ProductUpdateInput = inline_serializer(
    name="ProductUpdateInput",
    fields={
        **_INPUT_FIELDS,
        "price": serializers.FloatField(required=False),
    },
)

ProductEnvelope = inline_serializer(
    name="ProductEnvelope",
    fields={
        "message": serializers.CharField(),
        "product": ProductSerializer(),
    },
)

ProductListEnvelope = inline_serializer(
    name="ProductListEnvelope",
    fields={
        "message": serializers.CharField(),
        "products": ProductSerializer(many=True),
        "count": serializers.IntegerField(),
    },
)

ID_PARAMETER = OpenApiParameter(
    name="id",
    type=int,
    location=OpenApiParameter.PATH,
    description="The product ID",
)

PRODUCT_EXAMPLE = OpenApiExample(
    "Smartphone",
    value={
        "name": "Smartphone",
        "description": "Latest model smartphone",
        "price": 699.99,
        "currency": "USD",
        "quantity": 50,
        "active": True,
        "categoryId": 2,
    },
    request_only=True,
)

product_docs = extend_schema_view(
    create=extend_schema(
        summary="Create a new product",
        tags=TAGS,
        request=ProductCreateInput,
        examples=[PRODUCT_EXAMPLE],
        responses={
            201: OpenApiResponse(ProductEnvelope, description="Product created successfully"),
            404: error("Category does not exist", "Category does not exist"),
            409: error("Product already exists", "Product already exists"),
            422: error("Validation error", "Valid product price is required"),
            500: internal_error(),
        },
    ),
    list=extend_schema(
        summary="Retrieve a list of all products",
        tags=TAGS,
        responses={
            200: OpenApiResponse(ProductListEnvelope, description="Products fetched successfully"),
            500: internal_error(),
        },
    ),
    retrieve=extend_schema(
        summary="Get a product by ID",
        tags=TAGS,
        parameters=[ID_PARAMETER],
        responses={
            200: OpenApiResponse(ProductEnvelope, description="Product fetched successfully"),
            404: error("Product not found", "Product not found"),
            422: error("Product id is required", "Product id is required"),
            500: internal_error(),
        },
    ),
    update=extend_schema(
        summary="Update a product",
        description=(
            "Partial update: only the fields present in the body are written. "
            "`categoryId` must reference an existing category on every update "
            "and `name` must be present and not used by another product."
        ),
        tags=TAGS,
        parameters=[ID_PARAMETER],
        request=ProductUpdateInput,
        examples=[PRODUCT_EXAMPLE],
        responses={
            200: OpenApiResponse(ProductEnvelope, description="Product updated successfully"),
            404: error("Category or product not found", "Category does not exist"),
            409: error(
                "Product name already exists", "Product name already exists", key="message"
            ),
            422: error("Validation error", "Price and quantity cannot be negative"),
            500: internal_error(),
        },
    ),
    destroy=extend_schema(
        summary="Delete a product",
        tags=TAGS,
        parameters=[ID_PARAMETER],
        responses={
            200: OpenApiResponse(ProductEnvelope, description="Product successfully deleted"),
            404: error("Product not found", "Product not found"),
            422: error("Product id is required", "Product id is required"),
            500: internal_error(),
        },
    ),
    by_category=extend_schema(
        summary="List the products of a category ordered by name",
        tags=TAGS,
        parameters=[
            OpenApiParameter(
                name="category_id",
                type=int,
                location=OpenApiParameter.PATH,
                description="The category ID",
            )
        ],
        responses={
            200: OpenApiResponse(
                ProductListEnvelope,
                description="Products fetched successfully by categoryId",
            ),
            422: error(
                "Category id is required or not found",
                "Category id is required or not found",
                key="message",
            ),
            500: internal_error(key="message"),
        },
    ),
)

"""Shared OpenAPI building blocks for the module ``docs.py`` files."""

from __future__ import annotations

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, inline_serializer
from rest_framework import serializers

ErrorBody = inline_serializer(
    name="ErrorBody",
    fields={"error": serializers.CharField()},
)

MessageBody = inline_serializer(
    name="MessageBody",
    fields={"message": serializers.CharField()},
)


def error(description: str, message: str, key: str = "error") -> OpenApiResponse:
    """Document a ``{key: message}`` failure response."""
    return OpenApiResponse(
        response=ErrorBody if key == "error" else MessageBody,
        description=description,
        examples=[
            OpenApiExample(description, value={key: message}, response_only=True)
        ],
    )


def internal_error(key: str = "error") -> OpenApiResponse:
    return error("Internal server error", "Internal server error", key=key)

"""Category DRF serializers for API output.

Input is validated by the DTOs in ``dtos.py``; these serializers only
shape what the API returns.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """Full category representation."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Category
        fields = ["id", "name", "createdAt", "updatedAt"]
        read_only_fields = ["id"]


class CategorySummarySerializer(serializers.ModelSerializer):
    """``{id, name}`` summary embedded in product responses."""

    class Meta:
        model = Category
        fields = ["id", "name"]
        read_only_fields = ["id", "name"]

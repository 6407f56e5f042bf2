"""Product DRF serializers for API output.

Products embed their category as ``{id, name}`` and never expose the raw
``categoryId``.  Input is validated by the DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.serializers import CategorySummarySerializer
from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    category = CategorySummarySerializer(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "currency",
            "quantity",
            "active",
            "category",
        ]
        read_only_fields = fields

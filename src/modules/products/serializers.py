"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and only
renders products; request parsing goes through ``CreateProductDTO``.
Timestamps are exposed in camelCase (``createdAt`` / ``updatedAt``).
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = ["id", "name", "createdAt", "updatedAt"]
        read_only_fields = ["id"]


class ErrorSerializer(serializers.Serializer):
    """Body of every 400 response (documentation only)."""

    error = serializers.CharField()

"""Product DRF serializers for API output.

Input is validated by the request rule sets and Pydantic DTOs; this
serializer only renders the public product shape.  ``price`` is
rendered as a JSON number rather than DRF's default decimal string.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )

    class Meta:
        model = Product
        fields = ["id", "name", "price", "availability"]
        read_only_fields = ["id"]

"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views): it maps the
camelCase wire format onto DTO field names and rejects values of the
wrong type.  Business rules (blank names, past dates, empty item lists,
non-positive quantities) are deliberately left to
``modules.orders.validation`` so they are reported together, which is
why every field here is optional and nullable.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.dtos import OrderRequestDTO

# Largest quantity a 32-bit signed integer holds.
MAX_QUANTITY_IN_KILOS = 2**31 - 1

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.Serializer):
    fruitName = serializers.CharField(
        source="fruit_name",
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    quantityInKilos = serializers.IntegerField(
        source="quantity_in_kilos",
        required=False,
        allow_null=True,
        max_value=MAX_QUANTITY_IN_KILOS,
    )


class OrderRequestSerializer(serializers.Serializer):
    """Parses an order create/update payload.  An ``id`` key is ignored."""

    clientName = serializers.CharField(
        source="client_name",
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    deliveryDate = serializers.DateField(
        source="delivery_date", required=False, allow_null=True
    )
    # Only the list may be null; each entry must be an object.
    items = serializers.ListField(
        child=OrderItemSerializer(), required=False, allow_null=True
    )

    def to_dto(self) -> OrderRequestDTO:
        return OrderRequestDTO(**self.validated_data)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemResponseSerializer(serializers.Serializer):
    fruitName = serializers.CharField(source="fruit_name", read_only=True)
    quantityInKilos = serializers.IntegerField(
        source="quantity_in_kilos", read_only=True
    )


class OrderResponseSerializer(serializers.Serializer):
    """Renders an ``OrderResponseDTO``."""

    id = serializers.CharField(read_only=True)
    clientName = serializers.CharField(source="client_name", read_only=True)
    deliveryDate = serializers.DateField(source="delivery_date", read_only=True)
    items = OrderItemResponseSerializer(many=True, read_only=True)

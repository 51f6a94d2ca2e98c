"""Conversion between order DTOs and the ``Order`` domain record."""

from __future__ import annotations

from modules.orders.dtos import (
    OrderItemOutputDTO,
    OrderRequestDTO,
    OrderResponseDTO,
)
from modules.orders.models import Order, OrderItem


class OrderMapper:
    """Structural, order-preserving mapping with no business rules."""

    def to_entity(self, dto: OrderRequestDTO) -> Order:
        """Build an unsaved ``Order`` (``id`` is ``None``)."""
        return Order(
            client_name=dto.client_name,
            delivery_date=dto.delivery_date,
            items=[
                OrderItem(
                    fruit_name=item.fruit_name,
                    quantity_in_kilos=item.quantity_in_kilos,
                )
                for item in dto.items or []
            ],
        )

    def to_response(self, order: Order) -> OrderResponseDTO:
        return OrderResponseDTO(
            id=order.id,
            client_name=order.client_name,
            delivery_date=order.delivery_date,
            items=[
                OrderItemOutputDTO(
                    fruit_name=item.fruit_name,
                    quantity_in_kilos=item.quantity_in_kilos,
                )
                for item in order.items
            ],
        )

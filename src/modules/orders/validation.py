"""Order request validation rules.

Each rule is a pure function returning the list of violation messages it
found (empty when satisfied).  ``validate_order_request`` runs every rule
and accumulates the messages in a stable order; it never stops at the
first failure.

The delivery-date cutoff is computed when the rule runs, not when the
request was received: the earliest accepted date is ``today + 1``.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Sequence

from django.utils import timezone

from modules.orders.constants import (
    CLIENT_NAME_REQUIRED,
    DELIVERY_DATE_NOT_FUTURE,
    DELIVERY_DATE_REQUIRED,
    FRUIT_NAME_REQUIRED,
    ITEMS_REQUIRED,
    QUANTITY_NOT_POSITIVE,
)
from modules.orders.dtos import OrderItemDTO, OrderRequestDTO


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_client_name(client_name: Optional[str]) -> List[str]:
    return [CLIENT_NAME_REQUIRED] if _is_blank(client_name) else []


def validate_delivery_date_present(delivery_date: Optional[date]) -> List[str]:
    return [DELIVERY_DATE_REQUIRED] if delivery_date is None else []


def validate_future_delivery_date(
    delivery_date: Optional[date], today: Optional[date] = None
) -> List[str]:
    """Reject today and past dates.

    A missing date passes here; ``validate_delivery_date_present`` reports it.
    """
    if delivery_date is None:
        return []
    tomorrow = (today or timezone.localdate()) + timedelta(days=1)
    return [DELIVERY_DATE_NOT_FUTURE] if delivery_date < tomorrow else []


def validate_items_present(items: Optional[Sequence[OrderItemDTO]]) -> List[str]:
    return [ITEMS_REQUIRED] if not items else []


def validate_item(item: OrderItemDTO) -> List[str]:
    violations = []
    if _is_blank(item.fruit_name):
        violations.append(FRUIT_NAME_REQUIRED)
    if item.quantity_in_kilos is None or item.quantity_in_kilos <= 0:
        violations.append(QUANTITY_NOT_POSITIVE)
    return violations


def validate_order_request(
    dto: OrderRequestDTO, today: Optional[date] = None
) -> List[str]:
    """Return every violation found in ``dto``; an empty list means valid."""
    violations: List[str] = []
    violations += validate_client_name(dto.client_name)
    violations += validate_delivery_date_present(dto.delivery_date)
    violations += validate_future_delivery_date(dto.delivery_date, today)
    violations += validate_items_present(dto.items)
    for item in dto.items or []:
        violations += validate_item(item)
    return violations

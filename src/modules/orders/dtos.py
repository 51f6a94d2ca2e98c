"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

Request DTOs only carry data: every field is optional so that
``modules.orders.validation`` can report all rule violations together
instead of failing on the first missing field.

- ``OrderItemDTO``: one fruit/quantity line (input).
- ``OrderRequestDTO``: create/update payload (input).
- ``OrderItemOutputDTO``: one line item (output).
- ``OrderResponseDTO``: persisted order (output).
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class OrderItemDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    fruit_name: Optional[str] = None
    quantity_in_kilos: Optional[int] = None


class OrderRequestDTO(BaseModel):
    """Immutable DTO for order creation and full-replacement updates.

    Carries no ``id``: on create the store assigns it, on update the
    path parameter is authoritative.
    """

    model_config = ConfigDict(frozen=True)

    client_name: Optional[str] = None
    delivery_date: Optional[date] = None
    items: Optional[List[OrderItemDTO]] = None


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderItemOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    fruit_name: str
    quantity_in_kilos: int


class OrderResponseDTO(BaseModel):
    """Immutable DTO for order API responses.

    ``id`` is ``None`` only for an entity that has not been persisted.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    client_name: str
    delivery_date: date
    items: List[OrderItemOutputDTO]

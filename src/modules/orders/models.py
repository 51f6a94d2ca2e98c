"""Order and OrderItem domain records.

Plain dataclasses persisted as MongoDB documents by
``OrderMongoRepository``; no ORM is involved.  An Order owns its items
by composition and is always replaced as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class OrderItem:
    fruit_name: Optional[str]
    quantity_in_kilos: Optional[int]


@dataclass
class Order:
    """Order aggregate root.

    ``id`` is ``None`` until the store assigns one on first save.
    """

    client_name: Optional[str]
    delivery_date: Optional[date]
    items: List[OrderItem] = field(default_factory=list)
    id: Optional[str] = None

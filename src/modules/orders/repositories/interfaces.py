"""Order repository interface.

The Service Layer depends exclusively on this contract (DIP):
``save`` (insert without id, replace-by-id with one), ``find_all`` and
``find_by_id``.  Implementations must persist an Order and its items as
one unit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

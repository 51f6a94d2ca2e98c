"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
``modules.core.exceptions.api_exception_handler`` translates them
into the API error envelope (400 and 404 respectively).
"""

from __future__ import annotations

from typing import List, Sequence


class OrderValidationError(Exception):
    """The submitted order data broke one or more field rules.

    ``violations`` keeps every message in rule order; ``str(exc)`` joins
    them with ``", "``.
    """

    def __init__(self, violations: Sequence[str]) -> None:
        self.violations: List[str] = list(violations)
        super().__init__(", ".join(self.violations))


class OrderNotFound(Exception):
    """No persisted order has the requested id."""

    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        super().__init__(f"Order not found with id: {order_id}")

"""Order service layer (Use Cases).

Orchestrates validation, mapping and persistence for the order
lifecycle: create, list, fetch by id and full-replacement update.

Rules enforced here:
- Requests are validated before any repository access; all violations
  are reported together (``OrderValidationError``).
- Unknown ids raise ``OrderNotFound``; an update of an unknown id
  performs no write.
- On update the path id is authoritative and every other field is
  replaced.  There is no concurrency check: the last write wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.orders.exceptions import OrderNotFound, OrderValidationError
from modules.orders.mappers import OrderMapper
from modules.orders.validation import validate_order_request

if TYPE_CHECKING:
    from modules.orders.dtos import OrderRequestDTO, OrderResponseDTO
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the repository and mapper via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        mapper: Optional[OrderMapper] = None,
    ) -> None:
        self._order_repo = order_repository
        self._mapper = mapper or OrderMapper()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: OrderRequestDTO) -> OrderResponseDTO:
        """Validate, persist and return a new order.

        Raises:
            OrderValidationError: the request breaks one or more rules.
        """
        self._validate(dto)

        order = self._order_repo.save(self._mapper.to_entity(dto))

        logger.info("order.created", order_id=order.id, item_count=len(order.items))
        return self._mapper.to_response(order)

    def update_order(self, order_id: str, dto: OrderRequestDTO) -> OrderResponseDTO:
        """Replace every field of an existing order, keeping its id.

        Raises:
            OrderValidationError: the request breaks one or more rules.
            OrderNotFound: no order has ``order_id``.
        """
        self._validate(dto, order_id=order_id)

        if self._order_repo.find_by_id(order_id) is None:
            logger.warning("order.not_found", order_id=order_id)
            raise OrderNotFound(order_id)

        replacement = self._mapper.to_entity(dto)
        replacement.id = order_id
        order = self._order_repo.save(replacement)

        logger.info("order.updated", order_id=order_id, item_count=len(order.items))
        return self._mapper.to_response(order)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_orders(self) -> List[OrderResponseDTO]:
        return [self._mapper.to_response(o) for o in self._order_repo.find_all()]

    def get_order_by_id(self, order_id: str) -> OrderResponseDTO:
        """Retrieve a single order by id.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.find_by_id(order_id)
        if order is None:
            logger.info("order.not_found", order_id=order_id)
            raise OrderNotFound(order_id)
        return self._mapper.to_response(order)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate(self, dto: OrderRequestDTO, order_id: Optional[str] = None) -> None:
        violations = validate_order_request(dto)
        if violations:
            logger.warning(
                "order.validation_failed",
                order_id=order_id,
                violations=violations,
            )
            raise OrderValidationError(violations)

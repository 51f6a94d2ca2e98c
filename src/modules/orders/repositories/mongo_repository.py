"""MongoDB implementation of the Order repository.

Satisfies ``IOrderRepository`` using pymongo.  Each Order is one
document in the ``orders`` collection, items embedded, so a single
``insert_one`` / ``replace_one`` persists the whole aggregate atomically.

Document shape::

    {"_id": ObjectId, "clientName": str, "deliveryDate": datetime,
     "items": [{"fruitName": str, "quantityInKilos": int}]}

BSON has no date-only type: ``deliveryDate`` is stored at midnight and
converted back to ``date`` on read.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Dict, List, Optional

import structlog
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection

from modules.core import mongo
from modules.orders.constants import ORDERS_COLLECTION
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderMongoRepository(IOrderRepository):
    """Concrete Order repository backed by a MongoDB collection."""

    def __init__(self, collection: Optional[Collection] = None) -> None:
        if collection is None:
            collection = mongo.get_collection(ORDERS_COLLECTION)
        self._collection = collection

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def save(self, entity: Order) -> Order:
        """Insert a new order or fully replace an existing one.

        Replacement is by ``_id`` with ``upsert=True``; no version check is
        made, so concurrent writers overwrite each other.
        """
        document = _to_document(entity)

        if entity.id is None:
            result = self._collection.insert_one(document)
            order_id = str(result.inserted_id)
            logger.info("order.inserted", order_id=order_id)
        else:
            order_id = entity.id
            self._collection.replace_one(
                {"_id": ObjectId(order_id)}, document, upsert=True
            )
            logger.info("order.replaced", order_id=order_id)

        return Order(
            id=order_id,
            client_name=entity.client_name,
            delivery_date=entity.delivery_date,
            items=[
                OrderItem(fruit_name=i.fruit_name, quantity_in_kilos=i.quantity_in_kilos)
                for i in entity.items
            ],
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def find_by_id(self, id: str) -> Optional[Order]:
        """Return the order, or ``None`` for unknown or malformed ids."""
        try:
            object_id = ObjectId(id)
        except (InvalidId, TypeError):
            logger.debug("order.invalid_id", order_id=id)
            return None

        document = self._collection.find_one({"_id": object_id})
        return _to_entity(document) if document is not None else None

    def find_all(self) -> List[Order]:
        return [_to_entity(document) for document in self._collection.find()]


def _to_document(order: Order) -> Dict[str, Any]:
    return {
        "clientName": order.client_name,
        "deliveryDate": _date_to_bson(order.delivery_date),
        "items": [
            {"fruitName": item.fruit_name, "quantityInKilos": item.quantity_in_kilos}
            for item in order.items
        ],
    }


def _to_entity(document: Dict[str, Any]) -> Order:
    return Order(
        id=str(document["_id"]),
        client_name=document.get("clientName"),
        delivery_date=_date_from_bson(document.get("deliveryDate")),
        items=[
            OrderItem(
                fruit_name=item.get("fruitName"),
                quantity_in_kilos=item.get("quantityInKilos"),
            )
            for item in document.get("items") or []
        ],
    )


def _date_to_bson(value: Optional[date]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.combine(value, time.min)


def _date_from_bson(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value

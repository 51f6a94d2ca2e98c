"""Order repositories package."""

from modules.orders.repositories.interfaces import IOrderRepository
from modules.orders.repositories.mongo_repository import OrderMongoRepository

__all__ = ["IOrderRepository", "OrderMongoRepository"]

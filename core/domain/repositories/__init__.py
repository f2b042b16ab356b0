"""Repository interfaces."""

from .entity_repository import EntityRepository, ExistenceLookup
from .order_repository import OrderRepository

__all__ = ["EntityRepository", "ExistenceLookup", "OrderRepository"]

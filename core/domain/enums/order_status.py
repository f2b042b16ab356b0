"""
Order Status Enum.

Lifecycle states of a transport order.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""
    
    CREATED = "created"
    IN_TRANSIT = "in transit"
    COMPLETED = "completed"

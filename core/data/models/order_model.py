"""SQLAlchemy ORM model for orders."""

from sqlalchemy import Column, Index, String

from core.domain.enums import OrderStatus

from .base import Base, RecordMixin


class OrderModel(RecordMixin, Base):
    """
    SQLAlchemy ORM model for orders table.
    
    References are plain id columns. Existence is checked before writes and
    resolved with outer joins on reads, so no FK constraints are declared.
    """

    __tablename__ = "orders"

    user_id = Column(String(24), nullable=False, index=True)
    truck_id = Column(String(24), nullable=False, index=True)
    pickup_id = Column(String(24), nullable=False)
    dropoff_id = Column(String(24), nullable=False)
    status = Column(String(20), nullable=False, default=OrderStatus.CREATED.value)

    __table_args__ = (
        Index("ix_orders_status_created_at", "status", "created_at"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, status={self.status})>"

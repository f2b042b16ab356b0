"""SQLAlchemy ORM model for trucks."""

from sqlalchemy import Column, String

from .base import Base, RecordMixin


class TruckModel(RecordMixin, Base):
    """SQLAlchemy ORM model for trucks table."""

    __tablename__ = "trucks"

    # Reference to users.id, checked by the service layer (no FK constraint)
    user_id = Column(String(24), nullable=False, index=True)
    year = Column(String(10), nullable=False)
    color = Column(String(50), nullable=False)
    plates = Column(String(20), nullable=False, unique=True, index=True)

    def __repr__(self):
        return f"<TruckModel(id={self.id}, plates={self.plates})>"

"""SQLAlchemy ORM model for locations."""

from sqlalchemy import Column, Float, String

from .base import Base, RecordMixin


class LocationModel(RecordMixin, Base):
    """SQLAlchemy ORM model for locations table."""

    __tablename__ = "locations"

    address = Column(String(500), nullable=False)
    place_id = Column(String(255), nullable=False, unique=True, index=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    def __repr__(self):
        return f"<LocationModel(id={self.id}, place_id={self.place_id})>"

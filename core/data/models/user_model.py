"""SQLAlchemy ORM model for users."""

from sqlalchemy import Column, String

from .base import Base, RecordMixin


class UserModel(RecordMixin, Base):
    """SQLAlchemy ORM model for users table."""

    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<UserModel(id={self.id}, email={self.email})>"

"""Declarative base and shared columns."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base

from core.domain.value_objects import generate_entity_id

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp (stored without tz info)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class RecordMixin:
    """Generated id plus creation/update timestamps."""

    id = Column(String(24), primary_key=True, default=generate_entity_id)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

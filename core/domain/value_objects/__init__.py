"""Domain value objects."""

from .entity_id import ENTITY_ID_PATTERN, generate_entity_id

__all__ = [
    "ENTITY_ID_PATTERN",
    "generate_entity_id",
]

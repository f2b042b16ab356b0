"""Cross-collection validators."""

from .relation_validator import RelationValidator

__all__ = ["RelationValidator"]

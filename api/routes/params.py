"""Shared path parameter types."""

from typing import Annotated

from fastapi import Path

from core.domain.value_objects import ENTITY_ID_PATTERN

EntityIdPath = Annotated[str, Path(pattern=ENTITY_ID_PATTERN, description="24-character hex ID")]

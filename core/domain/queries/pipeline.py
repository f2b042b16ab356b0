"""
Declarative read pipelines.

A pipeline is an ordered list of stages describing a query without tying it
to any store. Repositories compile the stages into their own query language.

Stages:
- MatchStage: keep records whose fields equal the given values
- SortStage: order records by one or more fields
- SkipStage / LimitStage: pagination window
- LookupStage: left-join one reference field onto another collection and
  flatten it into a single embedded record (or None when nothing matches)
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ..enums import OrderStatus


ASCENDING = 1
DESCENDING = -1


@dataclass(frozen=True)
class MatchStage:
    conditions: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SortStage:
    # (field, direction) pairs, highest priority first
    keys: Tuple[Tuple[str, int], ...]


@dataclass(frozen=True)
class SkipStage:
    count: int


@dataclass(frozen=True)
class LimitStage:
    count: int


@dataclass(frozen=True)
class LookupStage:
    from_collection: str
    local_field: str
    foreign_field: str = "id"
    as_field: Optional[str] = None

    @property
    def target(self) -> str:
        return self.as_field or self.local_field


PipelineStage = Union[MatchStage, SortStage, SkipStage, LimitStage, LookupStage]


class PipelineBuilder:
    """
    Fluent builder for read pipelines.
    
    Every method appends one stage and returns the builder, so a pipeline
    reads in the order it runs:
    
        stages = (
            PipelineBuilder()
            .match(status="created")
            .sort(("created_at", DESCENDING))
            .skip(10)
            .limit(10)
            .lookup("users", "user")
            .build()
        )
    """

    def __init__(self) -> None:
        self._stages: List[PipelineStage] = []

    def match(self, **conditions: Any) -> "PipelineBuilder":
        self._stages.append(MatchStage(conditions=dict(conditions)))
        return self

    def sort(self, *keys: Tuple[str, int]) -> "PipelineBuilder":
        for _, direction in keys:
            if direction not in (ASCENDING, DESCENDING):
                raise ValueError(f"Sort direction must be 1 or -1, got: {direction}")
        self._stages.append(SortStage(keys=tuple(keys)))
        return self

    def skip(self, count: int) -> "PipelineBuilder":
        if count < 0:
            raise ValueError(f"Skip must be >= 0, got: {count}")
        self._stages.append(SkipStage(count=count))
        return self

    def limit(self, count: int) -> "PipelineBuilder":
        if count < 1:
            raise ValueError(f"Limit must be >= 1, got: {count}")
        self._stages.append(LimitStage(count=count))
        return self

    def lookup(
        self,
        from_collection: str,
        local_field: str,
        foreign_field: str = "id",
        as_field: Optional[str] = None,
    ) -> "PipelineBuilder":
        self._stages.append(
            LookupStage(
                from_collection=from_collection,
                local_field=local_field,
                foreign_field=foreign_field,
                as_field=as_field,
            )
        )
        return self

    def build(self) -> List[PipelineStage]:
        return list(self._stages)


# Collection backing each order reference field
ORDER_REFERENCE_COLLECTIONS = (
    ("user", "users"),
    ("truck", "trucks"),
    ("pickup", "locations"),
    ("dropoff", "locations"),
)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Largest row offset the stores accept (signed 64-bit)
MAX_OFFSET = 2**63 - 1


def build_orders_pipeline(
    status: Optional[OrderStatus] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> List[PipelineStage]:
    """
    Build the order listing pipeline.
    
    filter by status -> newest first -> page window -> expand references.
    The window is applied to orders before any reference is expanded.
    
    Args:
        status: Only keep orders with this status (all orders when None)
        page: 1-indexed page number
        limit: Page size
    
    Returns:
        Ordered list of stages
    """
    if page < 1:
        raise ValueError(f"Page must be >= 1, got: {page}")
    if (page - 1) * limit > MAX_OFFSET:
        raise ValueError(f"Page {page} is out of range for limit {limit}")

    conditions = {}
    if status:
        conditions["status"] = OrderStatus(status).value

    builder = (
        PipelineBuilder()
        .match(**conditions)
        # id breaks created_at ties so repeated listings are identical
        .sort(("created_at", DESCENDING), ("id", DESCENDING))
        .skip((page - 1) * limit)
        .limit(limit)
    )

    for reference_field, collection in ORDER_REFERENCE_COLLECTIONS:
        builder.lookup(collection, reference_field)

    return builder.build()

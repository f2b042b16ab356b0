"""Store-independent query descriptions."""

from .pipeline import (
    ASCENDING,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DESCENDING,
    LimitStage,
    LookupStage,
    MatchStage,
    PipelineBuilder,
    PipelineStage,
    SkipStage,
    SortStage,
    build_orders_pipeline,
)

__all__ = [
    "ASCENDING",
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "DESCENDING",
    "LimitStage",
    "LookupStage",
    "MatchStage",
    "PipelineBuilder",
    "PipelineStage",
    "SkipStage",
    "SortStage",
    "build_orders_pipeline",
]

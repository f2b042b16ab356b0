"""Read pipelines."""

from .order_read_pipeline import OrderReadPipeline

__all__ = ["OrderReadPipeline"]

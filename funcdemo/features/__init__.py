"""Functional building blocks exercised by the demos"""

from .aggregation import Summary, calculate_count, calculate_mean, calculate_sum, summarize
from .functional import Consumer, Function, Predicate, Supplier
from .optional import Optional
from .pipeline import Stream, group_by, partition_by

__all__ = [
    "Predicate",
    "Function",
    "Consumer",
    "Supplier",
    "Summary",
    "calculate_sum",
    "calculate_mean",
    "calculate_count",
    "summarize",
    "Stream",
    "group_by",
    "partition_by",
    "Optional",
]

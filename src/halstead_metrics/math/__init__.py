"""Mathematical core: Halstead formulas and batch statistics."""

from .halstead import (
    BASE_INPUTS,
    COUNT_NAMES,
    DERIVED_NAMES,
    METRIC_NAMES,
    FORMULAS,
    STROUD_NUMBER,
    Formula,
    MetricResult,
    derive,
)
from .summary import BatchStatistics, MetricSummary

__all__ = [
    "BASE_INPUTS",
    "COUNT_NAMES",
    "DERIVED_NAMES",
    "METRIC_NAMES",
    "FORMULAS",
    "STROUD_NUMBER",
    "Formula",
    "MetricResult",
    "derive",
    "BatchStatistics",
    "MetricSummary",
]

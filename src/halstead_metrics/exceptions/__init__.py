"""Exception hierarchy for Halstead Metrics."""

from .analysis import (
    AnalysisError,
    DegenerateInputError,
    MissingInputError,
    ParseFailureError,
    SourceUnavailableError,
)
from .base import HalsteadError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "HalsteadError",
    "AnalysisError",
    "MissingInputError",
    "SourceUnavailableError",
    "ParseFailureError",
    "DegenerateInputError",
    "ConfigurationError",
    "InvalidConfigError",
]

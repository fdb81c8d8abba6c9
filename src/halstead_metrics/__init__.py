"""
Halstead Metrics - Halstead software complexity measures

Classifies the tokens of a source file into operators and operands and
derives vocabulary, length, volume, difficulty, effort, time to program
and delivered bugs from the four base counts.
"""

__version__ = "0.2.0"

from .api import AnalysisRun, BatchEntry, analyze, analyze_file, analyze_files, analyze_source
from .classifier import DEFAULT_POLICY, ClassificationPolicy, ClassificationTally, Role, classify
from .config import AnalysisConfig, load_config
from .math.halstead import METRIC_NAMES, MetricResult, derive
from .scanning.models import TokenCategory, TokenRecord

__all__ = [
    "analyze",  # Main entry point (token stream in, AnalysisRun out)
    "analyze_source",
    "analyze_file",
    "analyze_files",
    "AnalysisRun",
    "BatchEntry",
    "AnalysisConfig",
    "load_config",
    "ClassificationPolicy",
    "ClassificationTally",
    "DEFAULT_POLICY",
    "Role",
    "classify",
    "MetricResult",
    "METRIC_NAMES",
    "derive",
    "TokenCategory",
    "TokenRecord",
]

"""Base formatter interface for Halstead Metrics output rendering."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..api import BatchEntry
from ..math.summary import MetricSummary
from ..ranking import RankedEntry
from ..temporal.models import HistoryPoint

METRIC_LABELS = {
    "n_operators": "Total operators",
    "n_operands": "Total operands",
    "n_distinct_operators": "Distinct operators",
    "n_distinct_operands": "Distinct operands",
    "prog_vocab": "Program vocabulary",
    "prog_length": "Program length",
    "est_prog_length": "Estimated program length",
    "volume": "Program volume",
    "min_volume": "Minimum volume",
    "difficulty": "Program difficulty",
    "level": "Program level",
    "lang_level": "Language level",
    "intel_content": "Intelligence content",
    "effort": "Program effort",
    "time_to_program": "Time to program",
    "delivered_bugs": "Delivered bugs",
}


def format_value(value: float, precision: int) -> str:
    """Integers as-is, everything else to ``precision`` decimals."""
    if isinstance(value, int):
        return str(value)
    return f"{value:.{precision}f}"


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render_report(self, entries: List[BatchEntry], precision: int) -> None:
        print(self.format_report(entries, precision), end="")

    def render_ranking(
        self,
        ranked: List[RankedEntry],
        summary: Optional[MetricSummary],
        metric: str,
        precision: int,
    ) -> None:
        print(self.format_ranking(ranked, summary, metric, precision), end="")

    def render_history(self, points: List[HistoryPoint], metric: str, precision: int) -> None:
        print(self.format_history(points, metric, precision), end="")

    @abstractmethod
    def format_report(self, entries: List[BatchEntry], precision: int) -> str:
        """Full metric listing for every entry."""

    @abstractmethod
    def format_ranking(
        self,
        ranked: List[RankedEntry],
        summary: Optional[MetricSummary],
        metric: str,
        precision: int,
    ) -> str:
        """Files sorted by one metric."""

    @abstractmethod
    def format_history(self, points: List[HistoryPoint], metric: str, precision: int) -> str:
        """One metric across the revisions of a file."""

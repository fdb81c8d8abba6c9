"""Ranking of batch results by a chosen metric."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .api import BatchEntry
from .exceptions import InvalidConfigError
from .math.halstead import METRIC_NAMES
from .math.summary import BatchStatistics, MetricSummary


@dataclass(frozen=True)
class RankedEntry:
    """One file's place in a ranking."""

    position: int
    source: str
    value: float
    outlier: bool = False


def rank(entries: Iterable[BatchEntry], metric: str = "effort") -> List[RankedEntry]:
    """Sort successful entries ascending by ``metric``.

    Failed entries are left out. Ties keep input order. Files above the
    upper IQR fence are flagged as outliers.

    Raises:
        InvalidConfigError: If metric is not a known Halstead metric
    """
    if metric not in METRIC_NAMES:
        raise InvalidConfigError("metric", metric, "unknown Halstead metric")

    scored = [(e.source, float(e.run.get(metric))) for e in entries if e.run is not None]
    scored.sort(key=lambda item: item[1])

    flags = BatchStatistics.outliers([value for _, value in scored])
    return [
        RankedEntry(position=i, source=source, value=value, outlier=flag)
        for i, ((source, value), flag) in enumerate(zip(scored, flags), start=1)
    ]


def summarize(ranked: List[RankedEntry]) -> Optional[MetricSummary]:
    """Distribution of the ranked values; None when nothing was ranked."""
    return BatchStatistics.summarize([r.value for r in ranked])

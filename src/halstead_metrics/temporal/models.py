"""Data models for per-revision (git history) analysis."""

from dataclasses import dataclass
from typing import Optional

from ..api import AnalysisRun
from ..exceptions import HalsteadError


@dataclass(frozen=True)
class Revision:
    sha: str
    timestamp: int  # unix seconds
    subject: str = ""

    @property
    def short_sha(self) -> str:
        return self.sha[:10]


@dataclass(frozen=True)
class HistoryPoint:
    """Analysis of one file at one revision."""

    revision: Revision
    run: Optional[AnalysisRun] = None
    error: Optional[HalsteadError] = None

    @property
    def ok(self) -> bool:
        return self.run is not None

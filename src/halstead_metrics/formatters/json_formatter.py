"""JSON formatter for Halstead Metrics.

Values are emitted at full precision; ``precision`` only affects text formats.
"""

import json
from dataclasses import asdict
from typing import List, Optional

from ..api import BatchEntry
from ..exceptions import HalsteadError
from ..math.summary import MetricSummary
from ..ranking import RankedEntry
from ..temporal.models import HistoryPoint
from .base import BaseFormatter


def _error_dict(error: HalsteadError) -> dict:
    return {"type": type(error).__name__, "message": error.message, "details": error.details}


class JsonFormatter(BaseFormatter):
    """Render results as JSON."""

    def format_report(self, entries: List[BatchEntry], precision: int) -> str:
        data = []
        for e in entries:
            if e.run is not None:
                data.append({"source": e.source, "metrics": e.run.to_record()})
            else:
                data.append({"source": e.source, "error": _error_dict(e.error)})
        return json.dumps(data, indent=2) + "\n"

    def format_ranking(
        self,
        ranked: List[RankedEntry],
        summary: Optional[MetricSummary],
        metric: str,
        precision: int,
    ) -> str:
        data = {
            "metric": metric,
            "ranking": [asdict(r) for r in ranked],
            "summary": asdict(summary) if summary is not None else None,
        }
        return json.dumps(data, indent=2) + "\n"

    def format_history(self, points: List[HistoryPoint], metric: str, precision: int) -> str:
        data = []
        for p in points:
            item = asdict(p.revision)
            if p.run is not None:
                item["metrics"] = p.run.to_record()
            else:
                item["error"] = _error_dict(p.error)
            data.append(item)
        return json.dumps({"metric": metric, "revisions": data}, indent=2) + "\n"

"""CSV formatter for Halstead Metrics."""

import csv
import io
from typing import List, Optional

from ..api import BatchEntry
from ..math.halstead import METRIC_NAMES
from ..math.summary import MetricSummary
from ..ranking import RankedEntry
from ..temporal.models import HistoryPoint
from .base import BaseFormatter, format_value


class CsvFormatter(BaseFormatter):
    """Render results as CSV."""

    def format_report(self, entries: List[BatchEntry], precision: int) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["source", *METRIC_NAMES, "error"])
        for e in entries:
            if e.run is not None:
                record = e.run.to_record()
                writer.writerow(
                    [e.source, *(format_value(record[n], precision) for n in METRIC_NAMES), ""]
                )
            else:
                writer.writerow([e.source, *([""] * len(METRIC_NAMES)), str(e.error)])
        return output.getvalue()

    def format_ranking(
        self,
        ranked: List[RankedEntry],
        summary: Optional[MetricSummary],
        metric: str,
        precision: int,
    ) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["position", "source", metric, "outlier"])
        for r in ranked:
            writer.writerow([r.position, r.source, f"{r.value:.{precision}f}", int(r.outlier)])
        return output.getvalue()

    def format_history(self, points: List[HistoryPoint], metric: str, precision: int) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["sha", "timestamp", "subject", metric, "error"])
        for p in points:
            rev = p.revision
            if p.run is not None:
                value = format_value(p.run.get(metric), precision)
                writer.writerow([rev.sha, rev.timestamp, rev.subject, value, ""])
            else:
                writer.writerow([rev.sha, rev.timestamp, rev.subject, "", str(p.error)])
        return output.getvalue()

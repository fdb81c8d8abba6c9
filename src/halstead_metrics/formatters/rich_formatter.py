"""Rich terminal formatter for Halstead Metrics."""

import io
from datetime import datetime, timezone
from typing import List, Optional

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.table import Table

from ..api import BatchEntry
from ..math.halstead import METRIC_NAMES
from ..math.summary import MetricSummary
from ..ranking import RankedEntry
from ..temporal.models import HistoryPoint
from .base import METRIC_LABELS, BaseFormatter, format_value


class RichFormatter(BaseFormatter):
    """Tables on the terminal; plain text when formatted to a string."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _to_text(self, renderables: List[RenderableType]) -> str:
        recorder = Console(file=io.StringIO(), record=True, width=120, color_system=None)
        for r in renderables:
            recorder.print(r)
        return recorder.export_text()

    # Report

    def _report_renderables(self, entries: List[BatchEntry], precision: int) -> List[RenderableType]:
        out: List[RenderableType] = []
        for i, e in enumerate(entries, start=1):
            if e.run is None:
                out.append(f"[red]{i}. {escape(e.source)}: {escape(str(e.error))}[/red]")
                continue

            table = Table(title=f"{i}. {escape(e.source)}", title_justify="left", show_header=True)
            table.add_column("Metric", style="cyan")
            table.add_column("Value", justify="right")
            record = e.run.to_record()
            for name in METRIC_NAMES:
                table.add_row(METRIC_LABELS[name], format_value(record[name], precision))
            out.append(table)
        return out

    def render_report(self, entries: List[BatchEntry], precision: int) -> None:
        for r in self._report_renderables(entries, precision):
            self.console.print(r)

    def format_report(self, entries: List[BatchEntry], precision: int) -> str:
        return self._to_text(self._report_renderables(entries, precision))

    # Ranking

    def _ranking_renderables(
        self,
        ranked: List[RankedEntry],
        summary: Optional[MetricSummary],
        metric: str,
        precision: int,
    ) -> List[RenderableType]:
        if not ranked:
            return ["[yellow]No files could be ranked.[/yellow]"]

        table = Table(title=f"Files by {METRIC_LABELS.get(metric, metric).lower()}")
        table.add_column("#", justify="right", style="dim")
        table.add_column(metric, justify="right")
        table.add_column("File")
        for r in ranked:
            value = f"{r.value:.{precision}f}"
            if r.outlier:
                value = f"[red bold]{value}[/red bold]"
            table.add_row(str(r.position), value, escape(r.source))

        out: List[RenderableType] = [table]
        if summary is not None and summary.count > 1:
            out.append(
                f"[dim]n={summary.count}  "
                f"min={summary.minimum:.{precision}f}  "
                f"median={summary.median:.{precision}f}  "
                f"mean={summary.mean:.{precision}f}  "
                f"p90={summary.p90:.{precision}f}  "
                f"max={summary.maximum:.{precision}f}[/dim]"
            )
        return out

    def render_ranking(
        self,
        ranked: List[RankedEntry],
        summary: Optional[MetricSummary],
        metric: str,
        precision: int,
    ) -> None:
        for r in self._ranking_renderables(ranked, summary, metric, precision):
            self.console.print(r)

    def format_ranking(
        self,
        ranked: List[RankedEntry],
        summary: Optional[MetricSummary],
        metric: str,
        precision: int,
    ) -> str:
        return self._to_text(self._ranking_renderables(ranked, summary, metric, precision))

    # History

    def _history_renderables(
        self, points: List[HistoryPoint], metric: str, precision: int
    ) -> List[RenderableType]:
        if not points:
            return ["[yellow]No revisions found.[/yellow]"]

        table = Table(title=f"{METRIC_LABELS.get(metric, metric)} by revision")
        table.add_column("Commit", style="cyan")
        table.add_column("Date")
        table.add_column(metric, justify="right")
        table.add_column("Subject", overflow="ellipsis", max_width=50)
        for p in points:
            date = datetime.fromtimestamp(p.revision.timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
            if p.run is not None:
                value = format_value(p.run.get(metric), precision)
            else:
                value = f"[red]{type(p.error).__name__}[/red]"
            table.add_row(p.revision.short_sha, date, value, escape(p.revision.subject))
        return [table]

    def render_history(self, points: List[HistoryPoint], metric: str, precision: int) -> None:
        for r in self._history_renderables(points, metric, precision):
            self.console.print(r)

    def format_history(self, points: List[HistoryPoint], metric: str, precision: int) -> str:
        return self._to_text(self._history_renderables(points, metric, precision))

"""Analyze command: per-file report or ranking by one metric."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from ..api import analyze_files
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..ranking import rank, summarize
from . import app
from ._common import err_console, resolve_config


@app.command()
def analyze(
    files: List[Path] = typer.Argument(..., help="Source files to analyze"),
    metric: Optional[str] = typer.Option(
        None,
        "--metric",
        "-m",
        help="Metric to rank files by (default: effort)",
    ),
    report: bool = typer.Option(
        False,
        "--report",
        "-r",
        help="Print every metric for each file instead of a ranking",
    ),
    precision: Optional[int] = typer.Option(
        None,
        "--precision",
        "-p",
        help="Decimal places (default: 2 for reports, 4 for rankings)",
        min=0,
        max=12,
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich, json or csv",
    ),
    lexer: Optional[str] = typer.Option(
        None,
        "--lexer",
        help="Pygments lexer alias to use instead of detecting by file name",
    ),
    ppi_dump: bool = typer.Option(
        False,
        "--ppi-dump",
        help="Inputs are PPI::Dumper listings, not source code",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Parallel workers for large batches",
        min=1,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also append log records to this file", dir_okay=False
    ),
):
    """
    Analyze the Halstead complexity of source files.

    Without [bold]--report[/bold], files are listed in ascending order of
    the chosen metric. Missing or unanalyzable files are skipped.

    [bold cyan]Examples:[/bold cyan]

      halstead analyze lib/Foo.pm bin/tool.pl

      halstead analyze --metric difficulty src/*.py

      halstead analyze --report --precision 3 lib/Foo.pm
    """
    settings = resolve_config(
        config=config,
        metric=metric,
        precision=precision,
        fmt=fmt,
        lexer=lexer,
        ppi_dump=ppi_dump,
        workers=workers,
        log_file=log_file,
        verbose=verbose,
        quiet=quiet,
    )
    setup_logging(settings.verbosity, settings.log_file)

    existing = []
    for f in files:
        if f.exists():
            existing.append(f)
        elif settings.verbosity != "quiet":
            err_console.print(f"[yellow]File {escape(str(f))} does not exist.[/yellow]")

    entries = analyze_files(existing, settings)
    formatter = get_formatter(settings.output_format)

    if report:
        formatter.render_report(entries, settings.report_precision())
    else:
        ranked = rank(entries, settings.metric)
        formatter.render_ranking(
            ranked, summarize(ranked), settings.metric, settings.ranking_precision()
        )

    if not any(e.ok for e in entries):
        raise typer.Exit(1)

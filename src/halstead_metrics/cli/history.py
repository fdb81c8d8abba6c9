"""History command: one metric across the git revisions of a file."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..exceptions import HalsteadError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..temporal import GitHistoryRunner
from . import app
from ._common import err_console, resolve_config


@app.command()
def history(
    file: Path = typer.Argument(
        ...,
        help="File whose committed versions to analyze",
        exists=True,
        dir_okay=False,
    ),
    max_commits: Optional[int] = typer.Option(
        None,
        "--max-commits",
        "-n",
        help="Maximum number of revisions to visit (default: 100)",
        min=1,
    ),
    metric: Optional[str] = typer.Option(
        None,
        "--metric",
        "-m",
        help="Metric to show per revision (default: effort)",
    ),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, max=12),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="rich, json or csv"),
    lexer: Optional[str] = typer.Option(None, "--lexer", help="Pygments lexer alias"),
    ppi_dump: bool = typer.Option(False, "--ppi-dump", help="Committed file is a PPI dump"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="TOML configuration file", exists=True, dir_okay=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also append log records to this file", dir_okay=False
    ),
):
    """
    Track a Halstead metric across the git history of one file.

    Revisions are listed newest first. A revision that fails to parse is
    shown as an error and does not stop the rest.

    [bold cyan]Examples:[/bold cyan]

      halstead history lib/Foo.pm

      halstead history --metric volume -n 20 lib/Foo.pm
    """
    settings = resolve_config(
        config=config,
        metric=metric,
        precision=precision,
        fmt=fmt,
        lexer=lexer,
        ppi_dump=ppi_dump,
        max_commits=max_commits,
        log_file=log_file,
        verbose=verbose,
        quiet=quiet,
    )
    setup_logging(settings.verbosity, settings.log_file)

    runner = GitHistoryRunner(file.resolve().parent, max_commits=settings.git_max_commits)
    try:
        points = runner.run(file, settings)
    except HalsteadError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    get_formatter(settings.output_format).render_history(
        points, settings.metric, settings.report_precision()
    )

    if not any(p.ok for p in points):
        raise typer.Exit(1)

"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import AnalysisConfig, load_config
from ..exceptions import HalsteadError

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def resolve_config(
    config: Optional[Path] = None,
    metric: Optional[str] = None,
    precision: Optional[int] = None,
    fmt: Optional[str] = None,
    lexer: Optional[str] = None,
    ppi_dump: Optional[bool] = None,
    workers: Optional[int] = None,
    max_commits: Optional[int] = None,
    log_file: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build config from CLI options, exiting with status 2 on bad settings."""
    try:
        return load_config(
            config_file=config,
            metric=metric,
            precision=precision,
            output_format=fmt,
            lexer=lexer,
            ppi_dump=ppi_dump or None,
            workers=workers,
            git_max_commits=max_commits,
            log_file=str(log_file) if log_file is not None else None,
            verbose=verbose,
            quiet=quiet,
        )
    except HalsteadError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

"""Public API for Halstead Metrics.

Example:
    >>> from halstead_metrics import analyze_file
    >>>
    >>> run = analyze_file("lib/Foo.pm")
    >>> print(f"Effort = {run.effort:.3f}")
    >>>
    >>> # Pre-tokenized input
    >>> run = analyze(tokens, source="Foo.pm")
    >>> run.to_record()["difficulty"]
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .classifier import DEFAULT_POLICY, ClassificationPolicy, ClassificationTally, classify
from .config import AnalysisConfig
from .exceptions import HalsteadError, MissingInputError
from .logging_config import get_logger
from .math.halstead import METRIC_NAMES, MetricResult, derive
from .scanning.lexer import tokenize_file, tokenize_source
from .scanning.models import TokenRecord
from .scanning.ppi_dump import read_ppi_dump_file

logger = get_logger(__name__)

# Parallel overhead is not worth it below this
_MIN_PARALLEL_FILES = 4


@dataclass(frozen=True)
class AnalysisRun:
    """Halstead analysis of one input: its tally and its derived metrics."""

    tally: ClassificationTally
    metrics: MetricResult
    source: Optional[str] = None

    @property
    def n_operators(self) -> int:
        return self.tally.operator_count

    @property
    def n_operands(self) -> int:
        return self.tally.operand_count

    @property
    def n_distinct_operators(self) -> int:
        return self.tally.n_distinct_operators

    @property
    def n_distinct_operands(self) -> int:
        return self.tally.n_distinct_operands

    @property
    def prog_vocab(self) -> int:
        return self.metrics.prog_vocab

    @property
    def prog_length(self) -> int:
        return self.metrics.prog_length

    @property
    def est_prog_length(self) -> float:
        return self.metrics.est_prog_length

    @property
    def volume(self) -> float:
        return self.metrics.volume

    @property
    def min_volume(self) -> float:
        return self.metrics.min_volume

    @property
    def difficulty(self) -> float:
        return self.metrics.difficulty

    @property
    def level(self) -> float:
        return self.metrics.level

    @property
    def lang_level(self) -> float:
        return self.metrics.lang_level

    @property
    def intel_content(self) -> float:
        return self.metrics.intel_content

    @property
    def effort(self) -> float:
        return self.metrics.effort

    @property
    def time_to_program(self) -> float:
        return self.metrics.time_to_program

    @property
    def delivered_bugs(self) -> float:
        return self.metrics.delivered_bugs

    def get(self, name: str) -> float:
        """Look up a metric by its stable name."""
        if name not in METRIC_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def to_record(self) -> Dict[str, float]:
        """One field per metric, in METRIC_NAMES order."""
        return {name: getattr(self, name) for name in METRIC_NAMES}


@dataclass(frozen=True)
class BatchEntry:
    """Outcome of one input in a batch: a run or the error that stopped it."""

    source: str
    run: Optional[AnalysisRun] = None
    error: Optional[HalsteadError] = None

    @property
    def ok(self) -> bool:
        return self.run is not None


def analyze(
    tokens: Optional[Iterable[TokenRecord]],
    source: Optional[str] = None,
    policy: ClassificationPolicy = DEFAULT_POLICY,
) -> AnalysisRun:
    """Classify a token stream and derive its metrics.

    Args:
        tokens: Token stream from a token source
        source: Optional label (usually the file path)
        policy: Category -> role policy

    Raises:
        MissingInputError: If tokens is None
        DegenerateInputError: If the stream has no operators or no operands
    """
    if tokens is None:
        raise MissingInputError("token stream")

    tally = classify(tokens, policy)
    logger.debug(
        f"{source or '<tokens>'}: N1={tally.operator_count} N2={tally.operand_count} "
        f"n1={tally.n_distinct_operators} n2={tally.n_distinct_operands}"
    )
    metrics = derive(
        tally.n_distinct_operators,
        tally.n_distinct_operands,
        tally.operator_count,
        tally.operand_count,
    )
    return AnalysisRun(tally=tally, metrics=metrics, source=source)


def analyze_source(
    code: Optional[str],
    filename: Optional[str] = None,
    lexer_name: Optional[str] = None,
    policy: ClassificationPolicy = DEFAULT_POLICY,
) -> AnalysisRun:
    """Tokenize source text with Pygments and analyze it."""
    if code is None:
        raise MissingInputError("source text")
    tokens = tokenize_source(code, filename=filename, lexer_name=lexer_name)
    return analyze(tokens, source=filename, policy=policy)


def analyze_file(
    path: Union[str, Path, None], config: Optional[AnalysisConfig] = None
) -> AnalysisRun:
    """Analyze one file.

    Args:
        path: Source file, or PPI dump listing when config.ppi_dump is set
        config: Analysis configuration (defaults when None)

    Raises:
        MissingInputError: If path is None
        SourceUnavailableError: If the file cannot be read
        ParseFailureError: If no lexer can tokenize it
        DegenerateInputError: If it has no operators or no operands
    """
    if path is None:
        raise MissingInputError("file")
    config = config or AnalysisConfig()

    if config.ppi_dump:
        tokens = read_ppi_dump_file(
            path, encoding=config.encoding, max_file_size_mb=config.max_file_size_mb
        )
    else:
        tokens = tokenize_file(
            path,
            lexer_name=config.lexer,
            encoding=config.encoding,
            max_file_size_mb=config.max_file_size_mb,
        )
    return analyze(tokens, source=str(path), policy=config.policy())


def _analyze_entry(path: Union[str, Path], config: AnalysisConfig) -> BatchEntry:
    try:
        return BatchEntry(source=str(path), run=analyze_file(path, config))
    except HalsteadError as e:
        logger.warning(f"Skipping {path}: {e}")
        return BatchEntry(source=str(path), error=e)


def analyze_files(
    paths: Sequence[Union[str, Path]], config: Optional[AnalysisConfig] = None
) -> List[BatchEntry]:
    """Analyze many files independently.

    A failure is recorded in its entry and never stops the batch. Entries
    come back in input order.
    """
    config = config or AnalysisConfig()
    workers = config.workers or 1

    if workers == 1 or len(paths) < _MIN_PARALLEL_FILES:
        return [_analyze_entry(p, config) for p in paths]

    logger.debug(f"Analyzing {len(paths)} files with {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda p: _analyze_entry(p, config), paths))

"""Halstead metric derivation from the four base counts.

    n1 = distinct operators     N1 = total operators
    n2 = distinct operands      N2 = total operands

Every derived metric is produced by an ordered formula pipeline. Each
formula names the values it reads; those are either base counts or metrics
computed earlier in the pipeline.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Callable, Dict, Mapping, NamedTuple, Tuple

from ..exceptions import DegenerateInputError

# Stroud number: elementary mental discriminations per second
STROUD_NUMBER = 18

# Effort-to-bugs divisor from Halstead's delivered bugs estimate
BUGS_DIVISOR = 3000

BASE_INPUTS: Tuple[str, ...] = ("n1", "n2", "N1", "N2")


class Formula(NamedTuple):
    """One derived metric: its name, the values it reads, and how to compute it."""

    name: str
    depends_on: Tuple[str, ...]
    compute: Callable[[Mapping[str, float]], float]


FORMULAS: Tuple[Formula, ...] = (
    Formula("prog_vocab", ("n1", "n2"), lambda v: v["n1"] + v["n2"]),
    Formula("prog_length", ("N1", "N2"), lambda v: v["N1"] + v["N2"]),
    Formula(
        "est_prog_length",
        ("n1", "n2"),
        lambda v: v["n1"] * math.log2(v["n1"]) + v["n2"] * math.log2(v["n2"]),
    ),
    Formula(
        "volume",
        ("prog_length", "prog_vocab"),
        lambda v: v["prog_length"] * math.log2(v["prog_vocab"]),
    ),
    Formula("min_volume", ("prog_vocab",), lambda v: float(v["prog_vocab"])),
    Formula(
        "difficulty",
        ("n1", "N2", "n2"),
        lambda v: (v["n1"] / 2) * (v["N2"] / v["n2"]),
    ),
    Formula("level", ("difficulty",), lambda v: 1 / v["difficulty"]),
    Formula(
        "lang_level",
        ("volume", "difficulty"),
        lambda v: v["volume"] / v["difficulty"] ** 2,
    ),
    Formula("intel_content", ("volume", "difficulty"), lambda v: v["volume"] / v["difficulty"]),
    Formula("effort", ("difficulty", "volume"), lambda v: v["difficulty"] * v["volume"]),
    Formula("time_to_program", ("effort",), lambda v: v["effort"] / STROUD_NUMBER),
    Formula(
        "delivered_bugs",
        ("effort",),
        lambda v: v["effort"] ** (2 / 3) / BUGS_DIVISOR,
    ),
)


@dataclass(frozen=True)
class MetricResult:
    """Every derived Halstead metric for one analysis run."""

    prog_vocab: int
    prog_length: int
    est_prog_length: float
    volume: float
    min_volume: float
    difficulty: float
    level: float
    lang_level: float
    intel_content: float
    effort: float
    time_to_program: float
    delivered_bugs: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


DERIVED_NAMES: Tuple[str, ...] = tuple(f.name for f in FORMULAS)


def _check_counts(n1: int, n2: int, N1: int, N2: int) -> None:
    """Reject counts that would make any formula undefined."""
    counts = {"n1": n1, "n2": n2, "N1": N1, "N2": N2}

    negative = [k for k, v in counts.items() if v < 0]
    if negative:
        raise DegenerateInputError(f"negative count for {', '.join(negative)}", counts)
    if n1 == 0:
        raise DegenerateInputError("no operators", counts)
    if n2 == 0:
        raise DegenerateInputError("no operands", counts)
    if N1 == 0 or N2 == 0:
        # Difficulty would be zero and level undefined
        raise DegenerateInputError("no operator or operand occurrences", counts)


def derive(n1: int, n2: int, N1: int, N2: int) -> MetricResult:
    """Compute all derived metrics.

    Args:
        n1: Number of distinct operators
        n2: Number of distinct operands
        N1: Total number of operators
        N2: Total number of operands

    Returns:
        MetricResult with every field populated

    Raises:
        DegenerateInputError: If counts are negative or leave a logarithm or
            denominator non-positive
    """
    _check_counts(n1, n2, N1, N2)

    values: Dict[str, float] = {"n1": n1, "n2": n2, "N1": N1, "N2": N2}
    for formula in FORMULAS:
        values[formula.name] = formula.compute(values)

    bad = [name for name in DERIVED_NAMES if not math.isfinite(values[name])]
    if bad:
        raise DegenerateInputError(
            f"non-finite result for {', '.join(bad)}", _base_counts(values)
        )

    return MetricResult(**{name: values[name] for name in DERIVED_NAMES})


def _base_counts(values: Mapping[str, float]) -> Dict[str, int]:
    return {k: int(values[k]) for k in BASE_INPUTS}


COUNT_NAMES: Tuple[str, ...] = (
    "n_operators",
    "n_operands",
    "n_distinct_operators",
    "n_distinct_operands",
)

# Stable names of every value an analysis run exposes
METRIC_NAMES: Tuple[str, ...] = COUNT_NAMES + DERIVED_NAMES

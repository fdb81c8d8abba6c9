"""Tests for halstead_metrics.math.halstead module."""

import math

import pytest

from halstead_metrics.exceptions import DegenerateInputError
from halstead_metrics.math.halstead import (
    BASE_INPUTS,
    DERIVED_NAMES,
    FORMULAS,
    METRIC_NAMES,
    MetricResult,
    derive,
)


class TestReferenceValues:
    """n1=5, n2=2, N1=8, N2=2 against hand-computed values."""

    @pytest.fixture
    def result(self):
        return derive(n1=5, n2=2, N1=8, N2=2)

    def test_counts(self, result):
        assert result.prog_vocab == 7
        assert result.prog_length == 10
        assert isinstance(result.prog_vocab, int)
        assert isinstance(result.prog_length, int)

    def test_rounded_values(self, result):
        """Values match to three decimal places."""
        assert round(result.est_prog_length, 3) == 13.610
        assert round(result.volume, 3) == 28.074
        assert round(result.difficulty, 3) == 2.5
        assert round(result.effort, 3) == 70.184
        assert round(result.time_to_program, 3) == 3.899
        assert round(result.delivered_bugs, 3) == 0.006

    def test_secondary_values(self, result):
        assert result.min_volume == 7.0
        assert result.level == pytest.approx(0.4)
        assert result.lang_level == pytest.approx(result.volume / 6.25)
        assert result.intel_content == pytest.approx(result.volume / 2.5)

    def test_swapped_totals(self):
        """Moving weight from operators to operands raises difficulty and effort."""
        result = derive(n1=5, n2=2, N1=2, N2=8)
        assert result.difficulty == pytest.approx(10.0)
        assert round(result.effort, 3) == 280.735


class TestIdentities:
    """Relationships between metrics that must hold for any valid counts."""

    @pytest.mark.parametrize(
        "counts",
        [(1, 1, 1, 1), (5, 2, 8, 2), (12, 30, 80, 95), (40, 3, 500, 3)],
    )
    def test_identities(self, counts):
        n1, n2, N1, N2 = counts
        r = derive(n1, n2, N1, N2)
        assert r.prog_vocab == n1 + n2
        assert r.prog_length == N1 + N2
        assert r.volume == pytest.approx(r.prog_length * math.log2(r.prog_vocab))
        assert r.effort == pytest.approx(r.difficulty * r.volume)
        assert r.level == pytest.approx(1 / r.difficulty)
        assert r.time_to_program == pytest.approx(r.effort / 18)
        assert r.delivered_bugs == pytest.approx(r.effort ** (2 / 3) / 3000)

    def test_all_fields_finite(self):
        r = derive(3, 4, 10, 12)
        assert all(math.isfinite(v) for v in r.as_dict().values())

    def test_difficulty_decreases_with_distinct_operands(self):
        """More distinct operands at fixed totals means lower difficulty."""
        values = [derive(5, n2, 8, 10).difficulty for n2 in range(1, 11)]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_single_operator_estimated_length(self):
        """log2(1) = 0, so a lone operator contributes nothing."""
        r = derive(1, 2, 1, 2)
        assert r.est_prog_length == pytest.approx(2.0)


class TestDegenerateInput:
    """Counts that leave a formula undefined are rejected."""

    def test_no_operands(self):
        with pytest.raises(DegenerateInputError) as exc:
            derive(3, 0, 5, 0)
        assert "no operands" in str(exc.value)
        assert exc.value.counts == {"n1": 3, "n2": 0, "N1": 5, "N2": 0}

    def test_no_operators(self):
        with pytest.raises(DegenerateInputError, match="no operators"):
            derive(0, 2, 0, 4)

    def test_empty(self):
        with pytest.raises(DegenerateInputError):
            derive(0, 0, 0, 0)

    def test_negative_count(self):
        with pytest.raises(DegenerateInputError, match="negative"):
            derive(2, 2, -1, 3)

    def test_zero_totals(self):
        with pytest.raises(DegenerateInputError, match="occurrences"):
            derive(2, 3, 4, 0)
        with pytest.raises(DegenerateInputError, match="occurrences"):
            derive(2, 3, 0, 4)

    def test_totals_below_distinct_counts_accepted(self):
        """Raw counts need not be a consistent tally; every formula stays defined."""
        result = derive(n1=5, n2=2, N1=2, N2=8)
        assert result.prog_length == 10
        assert round(result.difficulty, 3) == 10.0
        assert round(result.effort, 3) == 280.735


class TestPipeline:
    """The formula pipeline itself."""

    def test_dependencies_precede_dependents(self):
        available = set(BASE_INPUTS)
        for formula in FORMULAS:
            missing = set(formula.depends_on) - available
            assert not missing, f"{formula.name} reads {missing} before they exist"
            available.add(formula.name)

    def test_names_unique_and_match_result(self):
        assert len(set(DERIVED_NAMES)) == len(DERIVED_NAMES)
        assert set(DERIVED_NAMES) == set(MetricResult.__dataclass_fields__)

    def test_metric_names_cover_counts_and_derived(self):
        assert METRIC_NAMES[:4] == (
            "n_operators",
            "n_operands",
            "n_distinct_operators",
            "n_distinct_operands",
        )
        assert METRIC_NAMES[4:] == DERIVED_NAMES
        assert len(METRIC_NAMES) == 16

    def test_result_is_frozen(self):
        r = derive(5, 2, 8, 2)
        with pytest.raises(AttributeError):
            r.volume = 0.0

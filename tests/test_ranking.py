"""Tests for ranking batch results by a metric."""

import pytest

from halstead_metrics.api import BatchEntry, analyze
from halstead_metrics.exceptions import InvalidConfigError, SourceUnavailableError
from halstead_metrics.ranking import rank, summarize
from halstead_metrics.scanning.models import TokenCategory, TokenRecord


def _entry(source, n_operands):
    """Entry whose effort grows with n_operands (one operator, distinct operands)."""
    tokens = [TokenRecord(TokenCategory.OPERATOR, "+")]
    tokens += [TokenRecord(TokenCategory.SYMBOL, f"v{i}") for i in range(n_operands)]
    return BatchEntry(source=source, run=analyze(tokens, source=source))


def _failed(source):
    return BatchEntry(source=source, error=SourceUnavailableError(source, "file does not exist"))


class TestRank:
    """Ascending ranking of successful entries."""

    def test_ascending(self):
        entries = [_entry("big", 9), _entry("small", 2), _entry("mid", 5)]
        ranked = rank(entries, "effort")
        assert [r.source for r in ranked] == ["small", "mid", "big"]
        assert [r.position for r in ranked] == [1, 2, 3]
        assert ranked[0].value == pytest.approx(entries[1].run.effort)

    def test_failed_entries_excluded(self):
        entries = [_entry("a", 3), _failed("gone"), _entry("b", 2)]
        ranked = rank(entries)
        assert [r.source for r in ranked] == ["b", "a"]

    def test_ties_keep_input_order(self):
        entries = [_entry("first", 4), _entry("second", 4), _entry("third", 4)]
        assert [r.source for r in rank(entries)] == ["first", "second", "third"]

    def test_count_metric(self):
        entries = [_entry("a", 6), _entry("b", 3)]
        ranked = rank(entries, "n_operands")
        assert [(r.source, r.value) for r in ranked] == [("b", 3.0), ("a", 6.0)]

    def test_outlier_flagged(self):
        entries = [_entry(f"f{i}", 2 + i % 2) for i in range(6)] + [_entry("huge", 60)]
        ranked = rank(entries)
        assert ranked[-1].source == "huge"
        assert ranked[-1].outlier is True
        assert not any(r.outlier for r in ranked[:-1])

    def test_unknown_metric(self):
        with pytest.raises(InvalidConfigError):
            rank([_entry("a", 2)], "beauty")

    def test_nothing_to_rank(self):
        assert rank([_failed("x")]) == []


class TestSummarize:
    """Distribution of ranked values."""

    def test_summary(self):
        ranked = rank([_entry("a", 2), _entry("b", 4)], "n_operands")
        summary = summarize(ranked)
        assert summary.count == 2
        assert summary.minimum == 2.0
        assert summary.maximum == 4.0
        assert summary.mean == pytest.approx(3.0)

    def test_empty(self):
        assert summarize([]) is None

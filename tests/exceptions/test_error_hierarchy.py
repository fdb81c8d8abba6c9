"""Tests for the exception hierarchy."""

import pytest

from halstead_metrics.exceptions import (
    AnalysisError,
    ConfigurationError,
    DegenerateInputError,
    HalsteadError,
    InvalidConfigError,
    MissingInputError,
    ParseFailureError,
    SourceUnavailableError,
)


class TestHierarchy:
    """Every error is catchable as HalsteadError."""

    @pytest.mark.parametrize(
        "error",
        [
            MissingInputError(),
            SourceUnavailableError("a.pl", "file does not exist"),
            ParseFailureError("a.pl", "no lexer"),
            DegenerateInputError("no operands"),
        ],
    )
    def test_analysis_errors(self, error):
        assert isinstance(error, AnalysisError)
        assert isinstance(error, HalsteadError)

    def test_config_errors(self):
        error = InvalidConfigError("metric", "beauty", "unknown Halstead metric")
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, HalsteadError)
        assert not isinstance(error, AnalysisError)


class TestMessages:
    """Messages and details."""

    def test_details_in_str(self):
        error = SourceUnavailableError("lib/Foo.pm", "file does not exist")
        assert str(error) == (
            "Cannot read source: lib/Foo.pm (path=lib/Foo.pm, reason=file does not exist)"
        )
        assert error.details == {"path": "lib/Foo.pm", "reason": "file does not exist"}

    def test_no_details(self):
        assert str(HalsteadError("plain")) == "plain"

    def test_missing_input(self):
        error = MissingInputError("file")
        assert error.message == "No file supplied"
        assert error.what == "file"

    def test_parse_failure_without_path(self):
        error = ParseFailureError(None, "no lexer", lexer="cobol")
        assert error.message == "Failed to tokenize <source>"
        assert "path" not in error.details
        assert error.details["lexer"] == "cobol"

    def test_degenerate_counts(self):
        error = DegenerateInputError("no operands", {"n1": 3, "n2": 0, "N1": 4, "N2": 0})
        assert error.counts["n1"] == 3
        assert error.details["n2"] == "0"
        assert error.details["reason"] == "no operands"

    def test_invalid_config_fields(self):
        error = InvalidConfigError("workers", 0, "must be at least 1")
        assert error.key == "workers"
        assert error.value == 0
        assert error.details["value"] == "0"

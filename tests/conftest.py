"""Shared test fixtures for Halstead Metrics."""

import os
from pathlib import Path

import pytest

from halstead_metrics.scanning.models import TokenCategory, TokenRecord

FIXTURES = Path(__file__).parent / "fixtures"


def _tok(kind: TokenCategory, text: str) -> TokenRecord:
    return TokenRecord(kind, text)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def reference_tokens():
    """Stream that classifies as N1=8, N2=2, n1=5, n2=2.

    Comments, POD, whitespace and empty tokens are mixed in and must not count.
    """
    K = TokenCategory
    return [
        _tok(K.COMMENT, "# sample"),
        _tok(K.KEYWORD, "my"),
        _tok(K.WHITESPACE, " "),
        _tok(K.SYMBOL, "$x"),
        _tok(K.OPERATOR, "="),
        _tok(K.NUMBER, "1"),
        _tok(K.STRUCTURE, ";"),
        _tok(K.KEYWORD, "print"),
        _tok(K.STRUCTURE, ";"),
        _tok(K.KEYWORD, "my"),
        _tok(K.OPERATOR, "="),
        _tok(K.OTHER, ""),
        _tok(K.KEYWORD, "return"),
        _tok(K.DOCUMENTATION, "=pod\n\nDocs\n\n=cut"),
        _tok(K.END_MARKER, "__END__"),
    ]


@pytest.fixture
def operators_only_tokens():
    K = TokenCategory
    return [_tok(K.KEYWORD, "return"), _tok(K.STRUCTURE, ";")]


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Run with an empty HOME and cwd so no user config files leak in."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("HALSTEAD_"):
            monkeypatch.delenv(key)
    return work

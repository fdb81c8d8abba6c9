"""Tests for halstead_metrics.classifier module."""

import pytest

from halstead_metrics.classifier import (
    DEFAULT_POLICY,
    ClassificationPolicy,
    Role,
    classify,
)
from halstead_metrics.exceptions import InvalidConfigError
from halstead_metrics.scanning.models import TokenCategory, TokenRecord


class TestDefaultPolicy:
    """Canonical category -> role mapping."""

    @pytest.mark.parametrize(
        "category",
        ["number", "symbol", "heredoc", "data", "quote", "regex"],
    )
    def test_operands(self, category):
        assert DEFAULT_POLICY.role_of(TokenCategory(category)) is Role.OPERAND

    @pytest.mark.parametrize(
        "category",
        ["comment", "documentation", "end_marker", "whitespace"],
    )
    def test_ignored(self, category):
        assert DEFAULT_POLICY.role_of(TokenCategory(category)) is Role.IGNORED

    @pytest.mark.parametrize(
        "category",
        ["keyword", "operator", "punctuation", "structure", "other"],
    )
    def test_operators(self, category):
        assert DEFAULT_POLICY.role_of(TokenCategory(category)) is Role.OPERATOR

    def test_total(self):
        """Every category has exactly one role."""
        assert set(DEFAULT_POLICY.roles) == set(TokenCategory)

    def test_roles_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_POLICY.roles[TokenCategory.COMMENT] = Role.OPERATOR


class TestPolicyOverride:
    """Reassigning categories."""

    def test_override_by_name(self):
        policy = DEFAULT_POLICY.override({"comment": "operator"})
        assert policy.role_of(TokenCategory.COMMENT) is Role.OPERATOR
        # Original untouched
        assert DEFAULT_POLICY.role_of(TokenCategory.COMMENT) is Role.IGNORED

    def test_override_by_enum(self):
        policy = DEFAULT_POLICY.override({TokenCategory.KEYWORD: Role.OPERAND})
        assert policy.role_of(TokenCategory.KEYWORD) is Role.OPERAND

    def test_unknown_category(self):
        with pytest.raises(InvalidConfigError) as exc:
            DEFAULT_POLICY.override({"bareword": "operand"})
        assert exc.value.key == "roles"
        assert exc.value.__suppress_context__ is True

    def test_unknown_role(self):
        with pytest.raises(InvalidConfigError) as exc:
            DEFAULT_POLICY.override({"comment": "sometimes"})
        assert exc.value.key == "roles.comment"
        assert exc.value.__suppress_context__ is True

    def test_partial_mapping_rejected(self):
        with pytest.raises(InvalidConfigError):
            ClassificationPolicy({TokenCategory.NUMBER: Role.OPERAND})


class TestClassify:
    """Tallying a token stream."""

    def test_reference_stream(self, reference_tokens):
        tally = classify(reference_tokens)
        assert tally.operator_count == 8
        assert tally.operand_count == 2
        assert tally.n_distinct_operators == 5
        assert tally.n_distinct_operands == 2
        assert tally.distinct_operators == {"my", "=", ";", "print", "return"}
        assert tally.distinct_operands == {"$x", "1"}

    def test_empty_stream(self):
        tally = classify([])
        assert tally.operator_count == tally.operand_count == 0
        assert tally.n_distinct_operators == tally.n_distinct_operands == 0

    def test_blank_text_skipped(self):
        """Tokens with no visible text never count, whatever their category."""
        tokens = [
            TokenRecord(TokenCategory.OPERATOR, ""),
            TokenRecord(TokenCategory.NUMBER, "   "),
            TokenRecord(TokenCategory.OPERATOR, "\n"),
        ]
        tally = classify(tokens)
        assert tally.operator_count == 0
        assert tally.operand_count == 0

    def test_case_and_text_exact(self):
        """Distinctness is by exact text."""
        tokens = [
            TokenRecord(TokenCategory.SYMBOL, "$x"),
            TokenRecord(TokenCategory.SYMBOL, "$X"),
            TokenRecord(TokenCategory.SYMBOL, "$x"),
        ]
        tally = classify(tokens)
        assert tally.operand_count == 3
        assert tally.n_distinct_operands == 2

    def test_idempotent(self, reference_tokens):
        assert classify(reference_tokens) == classify(reference_tokens)

    def test_accepts_generator(self, reference_tokens):
        tally = classify(t for t in reference_tokens)
        assert tally.operator_count == 8

    def test_custom_policy(self, reference_tokens):
        policy = DEFAULT_POLICY.override({"comment": "operand"})
        tally = classify(reference_tokens, policy)
        assert tally.operand_count == 3
        assert "# sample" in tally.distinct_operands

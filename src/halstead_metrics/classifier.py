"""Operator/operand classification of token streams.

The role of every token category is fixed by a ClassificationPolicy, a total
mapping decided once at this boundary:

    OPERAND   number, symbol, heredoc, data, quote, regex
    IGNORED   comment, documentation, end_marker, whitespace
    OPERATOR  everything else (keywords, operators, punctuation, structure)

Tokens with no text payload are skipped regardless of category.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from .exceptions import InvalidConfigError
from .scanning.models import TokenCategory, TokenRecord


class Role(Enum):
    """Halstead role of a token."""

    OPERATOR = "operator"
    OPERAND = "operand"
    IGNORED = "ignored"


_OPERAND_CATEGORIES = (
    TokenCategory.NUMBER,
    TokenCategory.SYMBOL,
    TokenCategory.HEREDOC,
    TokenCategory.DATA,
    TokenCategory.QUOTE,
    TokenCategory.REGEX,
)
_IGNORED_CATEGORIES = (
    TokenCategory.COMMENT,
    TokenCategory.DOCUMENTATION,
    TokenCategory.END_MARKER,
    TokenCategory.WHITESPACE,
)


def _default_roles() -> dict[TokenCategory, Role]:
    roles = {category: Role.OPERATOR for category in TokenCategory}
    roles.update({category: Role.OPERAND for category in _OPERAND_CATEGORIES})
    roles.update({category: Role.IGNORED for category in _IGNORED_CATEGORIES})
    return roles


@dataclass(frozen=True)
class ClassificationPolicy:
    """Total mapping from TokenCategory to Role."""

    roles: Mapping[TokenCategory, Role] = field(default_factory=_default_roles)

    def __post_init__(self) -> None:
        missing = [c.value for c in TokenCategory if c not in self.roles]
        if missing:
            raise InvalidConfigError("roles", ", ".join(missing), "categories without a role")
        object.__setattr__(self, "roles", MappingProxyType(dict(self.roles)))

    def role_of(self, category: TokenCategory) -> Role:
        return self.roles[category]

    def override(
        self, overrides: Mapping[Union[TokenCategory, str], Union[Role, str]]
    ) -> "ClassificationPolicy":
        """Return a new policy with some categories reassigned.

        Keys and values may be enum members or their string values
        (e.g. ``{"comment": "operator"}``).

        Raises:
            InvalidConfigError: On an unknown category or role name
        """
        roles = dict(self.roles)
        for key, value in overrides.items():
            try:
                category = key if isinstance(key, TokenCategory) else TokenCategory(key)
            except ValueError:
                raise InvalidConfigError("roles", key, "unknown token category") from None
            try:
                role = value if isinstance(value, Role) else Role(value)
            except ValueError:
                raise InvalidConfigError(f"roles.{category.value}", value, "unknown role") from None
            roles[category] = role
        return ClassificationPolicy(roles)


DEFAULT_POLICY = ClassificationPolicy()


@dataclass(frozen=True)
class ClassificationTally:
    """Totals and distinct values of operators and operands for one run."""

    operator_count: int
    operand_count: int
    distinct_operators: frozenset[str]
    distinct_operands: frozenset[str]

    @property
    def n_distinct_operators(self) -> int:
        return len(self.distinct_operators)

    @property
    def n_distinct_operands(self) -> int:
        return len(self.distinct_operands)


def classify(
    tokens: Iterable[TokenRecord], policy: ClassificationPolicy = DEFAULT_POLICY
) -> ClassificationTally:
    """Tally operators and operands over a token stream in a single pass."""
    operator_count = 0
    operand_count = 0
    operators: set[str] = set()
    operands: set[str] = set()

    for token in tokens:
        if not token.text or not token.text.strip():
            continue

        role = policy.role_of(token.kind)
        if role is Role.OPERATOR:
            operator_count += 1
            operators.add(token.text)
        elif role is Role.OPERAND:
            operand_count += 1
            operands.add(token.text)

    return ClassificationTally(
        operator_count=operator_count,
        operand_count=operand_count,
        distinct_operators=frozenset(operators),
        distinct_operands=frozenset(operands),
    )

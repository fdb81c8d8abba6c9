"""Data models for the token source layer."""

from dataclasses import dataclass
from enum import Enum


class TokenCategory(Enum):
    """Closed set of token categories understood by the classifier.

    Token sources translate their native labels (Pygments token types,
    PPI class names) into one of these at the boundary.
    """

    NUMBER = "number"
    SYMBOL = "symbol"
    HEREDOC = "heredoc"
    DATA = "data"
    QUOTE = "quote"
    REGEX = "regex"
    COMMENT = "comment"
    DOCUMENTATION = "documentation"
    END_MARKER = "end_marker"
    WHITESPACE = "whitespace"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    STRUCTURE = "structure"
    OTHER = "other"


@dataclass(frozen=True)
class TokenRecord:
    """One labelled token: its category and its source text."""

    kind: TokenCategory
    text: str

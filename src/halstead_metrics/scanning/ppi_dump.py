"""Reader for ``PPI::Dumper`` token listings.

A dump has one element per line, indented by depth::

    PPI::Document
      PPI::Statement::Variable
        PPI::Token::Word    'my'
        PPI::Token::Symbol  '$x'
        PPI::Token::Operator    '='
        PPI::Token::Number  '1'
        PPI::Token::Structure   ';'

Lines without a text payload are structural nodes and carry no token.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from ..logging_config import get_logger
from .lexer import read_source
from .models import TokenCategory, TokenRecord

logger = get_logger(__name__)

_PREFIX = "PPI::Token::"

# Longest prefix wins, so subclasses listed here override their parents
PPI_CATEGORIES: dict[str, TokenCategory] = {
    "Number": TokenCategory.NUMBER,
    "Symbol": TokenCategory.SYMBOL,
    "Magic": TokenCategory.SYMBOL,
    "ArrayIndex": TokenCategory.SYMBOL,
    "HereDoc": TokenCategory.HEREDOC,
    "Data": TokenCategory.DATA,
    "Quote": TokenCategory.QUOTE,
    "QuoteLike": TokenCategory.QUOTE,
    "QuoteLike::Regexp": TokenCategory.REGEX,
    "Regexp": TokenCategory.REGEX,
    "Comment": TokenCategory.COMMENT,
    "Pod": TokenCategory.DOCUMENTATION,
    "End": TokenCategory.END_MARKER,
    "Separator": TokenCategory.END_MARKER,
    "Whitespace": TokenCategory.WHITESPACE,
    "Word": TokenCategory.KEYWORD,
    "Operator": TokenCategory.OPERATOR,
    "Cast": TokenCategory.OPERATOR,
    "Structure": TokenCategory.STRUCTURE,
}


def ppi_category(class_name: str) -> TokenCategory:
    """Map a PPI class name such as ``PPI::Token::Quote::Double`` to a category."""
    if not class_name.startswith(_PREFIX):
        return TokenCategory.OTHER

    suffix = class_name[len(_PREFIX):]
    best: Optional[str] = None
    for key in PPI_CATEGORIES:
        if suffix == key or suffix.startswith(key + "::"):
            if best is None or len(key) > len(best):
                best = key
    return PPI_CATEGORIES[best] if best is not None else TokenCategory.OTHER


def iter_dump(lines: Iterable[str]) -> Iterator[TokenRecord]:
    """Yield a TokenRecord for every dump line that carries text."""
    for line in lines:
        parts = line.strip().split(None, 1)
        if len(parts) < 2:
            continue
        class_name, text = parts
        yield TokenRecord(ppi_category(class_name), text)


def read_ppi_dump(text: str) -> list[TokenRecord]:
    """Parse a full dump listing."""
    return list(iter_dump(text.splitlines()))


def read_ppi_dump_file(
    path: Union[str, Path], encoding: str = "utf-8", max_file_size_mb: Optional[float] = None
) -> list[TokenRecord]:
    """Read and parse a dump listing from disk."""
    tokens = read_ppi_dump(read_source(path, encoding=encoding, max_file_size_mb=max_file_size_mb))
    logger.debug(f"Read {len(tokens)} tokens from dump {path}")
    return tokens

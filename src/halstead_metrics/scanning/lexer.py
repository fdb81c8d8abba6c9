"""Pygments-backed token source.

Turns source text into a stream of ``TokenRecord`` objects. Lexer choice
goes, in order: explicit lexer name, file name, content guess.

Usage:
    tokens = tokenize_source(code, filename="lib/Foo.pm")
    tokens = tokenize_file(Path("bin/tool.pl"))
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Union

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename, guess_lexer
from pygments.token import (
    Comment,
    Keyword,
    Literal,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Text,
    Whitespace,
    _TokenType,
)
from pygments.util import ClassNotFound

from ..exceptions import ParseFailureError, SourceUnavailableError
from ..logging_config import get_logger
from .models import TokenCategory, TokenRecord

logger = get_logger(__name__)

# Markers after which the rest of the file is not code
_END_MARKERS = {
    "__END__": TokenCategory.END_MARKER,
    "__DATA__": TokenCategory.DATA,
}

# Pygments also claims .pl for Prolog and guesses between the two by content
PERL_EXTENSIONS = (".pl", ".pm", ".t", ".psgi")


def get_lexer(
    code: str, filename: Optional[str] = None, lexer_name: Optional[str] = None
) -> Lexer:
    """Resolve the Pygments lexer for a source.

    Raises:
        ParseFailureError: If no lexer matches the name or file name
    """
    try:
        if lexer_name:
            return get_lexer_by_name(lexer_name)
        if filename:
            if filename.lower().endswith(PERL_EXTENSIONS):
                return get_lexer_by_name("perl")
            return get_lexer_for_filename(filename, code)
        return guess_lexer(code)
    except ClassNotFound as e:
        raise ParseFailureError(filename, str(e), lexer=lexer_name) from e


def _is_end_marker(ttype: _TokenType, value: str) -> bool:
    # Perl lexes __END__ as a preprocessor comment and __DATA__ as a pseudo builtin
    return value.strip() in _END_MARKERS and (ttype in Comment.Preproc or ttype in Name.Builtin)


def categorize(ttype: _TokenType, value: str) -> TokenCategory:
    """Map a Pygments token type to a TokenCategory.

    More specific types are checked before their parents.
    """
    if _is_end_marker(ttype, value):
        return _END_MARKERS[value.strip()]
    if ttype in String.Doc:
        return TokenCategory.DOCUMENTATION
    if ttype in Comment.Multiline and value.lstrip().startswith("="):
        # POD block
        return TokenCategory.DOCUMENTATION
    if ttype in Comment:
        return TokenCategory.COMMENT
    if ttype in String.Heredoc:
        return TokenCategory.HEREDOC
    if ttype in String.Regex:
        return TokenCategory.REGEX
    if ttype in Number:
        return TokenCategory.NUMBER
    if ttype in Literal:
        return TokenCategory.QUOTE
    if ttype in Name.Builtin:
        return TokenCategory.KEYWORD
    if ttype in Name:
        return TokenCategory.SYMBOL
    if ttype in Keyword:
        return TokenCategory.KEYWORD
    if ttype in Operator:
        return TokenCategory.OPERATOR
    if ttype in Punctuation:
        return TokenCategory.PUNCTUATION
    if ttype in Whitespace or (ttype in Text and not value.strip()):
        return TokenCategory.WHITESPACE
    return TokenCategory.OTHER


def iter_tokens(lexer: Lexer, code: str) -> Iterator[TokenRecord]:
    """Lex ``code`` and yield categorized tokens.

    Everything after an ``__END__`` or ``__DATA__`` marker is raw text and
    becomes a single token of the marker's category. Adjacent symbol
    fragments are joined, since some lexers emit a sigil and its name
    separately (``$`` then ``x``).
    """
    trailing: Optional[TokenCategory] = None
    rest: list[str] = []
    symbol: Optional[str] = None

    for ttype, value in lexer.get_tokens(code):
        if trailing is not None:
            rest.append(value)
            continue

        kind = categorize(ttype, value)
        if kind is TokenCategory.SYMBOL:
            symbol = value if symbol is None else symbol + value
            continue
        if symbol is not None:
            yield TokenRecord(TokenCategory.SYMBOL, symbol)
            symbol = None

        if _is_end_marker(ttype, value):
            trailing = kind
            # The marker itself is never data
            kind = TokenCategory.END_MARKER
        yield TokenRecord(kind, value)

    if symbol is not None:
        yield TokenRecord(TokenCategory.SYMBOL, symbol)
    if trailing is not None and rest:
        yield TokenRecord(trailing, "".join(rest))


def tokenize_source(
    code: str, filename: Optional[str] = None, lexer_name: Optional[str] = None
) -> list[TokenRecord]:
    """Tokenize source text.

    Args:
        code: Source text
        filename: Optional file name, used to pick a lexer
        lexer_name: Optional Pygments lexer alias (e.g. "perl"), wins over filename

    Returns:
        List of TokenRecord in source order

    Raises:
        ParseFailureError: If no lexer is found or lexing fails
    """
    lexer = get_lexer(code, filename=filename, lexer_name=lexer_name)
    logger.debug(f"Lexing {filename or '<source>'} with {lexer.name}")
    try:
        return list(iter_tokens(lexer, code))
    except Exception as e:
        raise ParseFailureError(filename, str(e), lexer=lexer.name) from e


def read_source(
    path: Union[str, Path], encoding: str = "utf-8", max_file_size_mb: Optional[float] = None
) -> str:
    """Read a source file, mapping every I/O failure to SourceUnavailableError."""
    path = Path(path)
    if not path.exists():
        raise SourceUnavailableError(path, "file does not exist")
    if not path.is_file():
        raise SourceUnavailableError(path, "not a regular file")

    try:
        size = path.stat().st_size
        if max_file_size_mb is not None and size > max_file_size_mb * 1024 * 1024:
            raise SourceUnavailableError(
                path, f"file is {size} bytes, limit is {max_file_size_mb}MB"
            )
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise SourceUnavailableError(path, f"cannot decode as {encoding}: {e.reason}") from e
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e


def tokenize_file(
    path: Union[str, Path],
    lexer_name: Optional[str] = None,
    encoding: str = "utf-8",
    max_file_size_mb: Optional[float] = None,
) -> list[TokenRecord]:
    """Read and tokenize a source file."""
    code = read_source(path, encoding=encoding, max_file_size_mb=max_file_size_mb)
    return tokenize_source(code, filename=Path(path).name, lexer_name=lexer_name)

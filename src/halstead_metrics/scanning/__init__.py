"""Token sources: Pygments lexing and PPI dump reading."""

from .lexer import categorize, get_lexer, read_source, tokenize_file, tokenize_source
from .models import TokenCategory, TokenRecord
from .ppi_dump import ppi_category, read_ppi_dump, read_ppi_dump_file

__all__ = [
    "TokenCategory",
    "TokenRecord",
    "categorize",
    "get_lexer",
    "read_source",
    "tokenize_source",
    "tokenize_file",
    "ppi_category",
    "read_ppi_dump",
    "read_ppi_dump_file",
]

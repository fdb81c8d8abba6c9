"""Analysis-related exceptions: missing input, unreadable sources, degenerate counts."""

from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from .base import HalsteadError


class AnalysisError(HalsteadError):
    """Base class for errors that abort a single analysis run."""

    pass


class MissingInputError(AnalysisError):
    """Raised when no file or token stream is supplied to an entry point."""

    def __init__(self, what: str = "token stream"):
        super().__init__(f"No {what} supplied", details={"missing": what})
        self.what = what


class SourceUnavailableError(AnalysisError):
    """Raised when a source cannot be read (missing, unreadable, too large)."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot read source: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class ParseFailureError(AnalysisError):
    """Raised when the lexer cannot turn a source into a token stream."""

    def __init__(self, path: Union[str, Path, None], reason: str, lexer: Optional[str] = None):
        details: Dict[str, str] = {"reason": reason}
        if path is not None:
            details["path"] = str(path)
        if lexer is not None:
            details["lexer"] = lexer

        target = path if path is not None else "<source>"
        super().__init__(f"Failed to tokenize {target}", details=details)
        self.path = path
        self.reason = reason
        self.lexer = lexer


class DegenerateInputError(AnalysisError):
    """Raised when the base counts leave one or more formulas undefined."""

    def __init__(self, reason: str, counts: Optional[Mapping[str, int]] = None):
        details: Dict[str, str] = {"reason": reason}
        if counts:
            details.update({k: str(v) for k, v in counts.items()})

        super().__init__(f"Degenerate input: {reason}", details=details)
        self.reason = reason
        self.counts = dict(counts or {})

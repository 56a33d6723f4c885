"""Exception hierarchy for token import."""

from enum import Enum
from typing import Optional


class TokenImportError(Exception):
    """Base class for every error raised by tokenimport."""
    pass


class ParseErrorKind(Enum):
    """Kinds of fatal parse failure."""

    INVALID_SYNTAX = "invalid_syntax"


class ParseError(TokenImportError):
    """
    Raised when a document cannot be parsed at all.

    Properties:
        kind: ParseErrorKind
        message: Human-readable reason, surfaced to the user as-is
        line: 1-based line number when known
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind = ParseErrorKind.INVALID_SYNTAX,
        line: Optional[int] = None,
    ):
        self.message = message
        self.kind = kind
        self.line = line
        super().__init__(message if line is None else f"{message} (line {line})")


class UnsupportedFormatError(TokenImportError):
    """Raised when a file name does not map to a supported format."""
    pass


class VariableStoreError(TokenImportError):
    """Raised by a variable store that refuses an operation."""
    pass


__all__ = [
    "TokenImportError",
    "ParseErrorKind",
    "ParseError",
    "UnsupportedFormatError",
    "VariableStoreError",
]

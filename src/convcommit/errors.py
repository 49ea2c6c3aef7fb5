"""Exception classes for convcommit.

Lexing and parsing report failures by raising; there is no partial result.
Every error carries the position of the offending input.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Grammar rule violated by a rejected commit message."""

    MISSING_TYPE = "missing-type"
    INVALID_TYPE = "invalid-type"
    UNCLOSED_SCOPE = "unclosed-scope"
    MISSING_COLON = "missing-colon"
    MISSING_DESCRIPTION = "missing-description"
    UNEXPECTED_TOKEN = "unexpected-token"
    HEADER_TOO_LONG = "header-too-long"


def _format_location(
    lineno: int | None,
    col_offset: int | None,
    source_file: str | None,
) -> str:
    """Build the "file:line:col " prefix used in error messages."""
    location = ""
    if source_file:
        location = f"{source_file}:"
    if lineno is not None:
        location += f"{lineno}:"
        if col_offset is not None:
            location += f"{col_offset}:"
    if location:
        location = location.rstrip(":") + " "
    return location


class ConvCommitError(Exception):
    """Base exception for all convcommit errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(ConvCommitError):
    """Error during tokenization.

    The lexer is total over all strings; this is only raised when a scan
    step fails to make forward progress.
    """

    def __init__(
        self,
        message: str,
        position: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error.

        Args:
            message: Error description
            position: Character offset where scanning stalled
            lineno: Line number (1-indexed)
            col_offset: Column offset (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.position = position
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        super().__init__(f"{_format_location(lineno, col_offset, source_file)}{message}")


class ParseError(ConvCommitError):
    """Error during commit message parsing.

    Raised when the token stream violates the Conventional Commits grammar.
    The ``kind`` attribute names the violated rule.
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        position: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            kind: Violated grammar rule
            position: Character offset of the offending token
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.kind = kind
        self.position = position
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        super().__init__(f"{_format_location(lineno, col_offset, source_file)}{message}")

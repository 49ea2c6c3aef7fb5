"""Token and TokenType definitions for the convcommit lexer.

Tokens carry plain coordinates; a SourceLocation is only built when
someone asks for ``token.location`` (usually an error message).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from convcommit.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Structural characters only get their own token type on the header
    line (and for footer separators); everywhere else they are folded
    into TEXT.

    """

    # Message structure
    EOF = auto()
    NEWLINE = auto()  # Single line break
    BLANK_LINE = auto()  # Two or more line breaks (section boundary)

    # Header and footer keys
    WORD = auto()  # Run of non-whitespace, non-structural characters

    # Structural characters
    COLON = auto()  # :
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    BANG = auto()  # ! (breaking-change marker)
    HASH = auto()  # # (footer reference separator)

    # Separators and free-form content
    WHITESPACE = auto()  # Run of spaces/tabs, collapsed to one token
    TEXT = auto()  # Description, body lines and footer values


@dataclass(frozen=True, slots=True)
class Token:
    """One lexeme of a commit message.

    ``value`` is the exact slice ``message[position:end_position]``, so
    token values joined in order give back the original message.
    """

    type: TokenType
    value: str
    position: int
    end_position: int
    lineno: int
    col: int
    end_lineno: int
    end_col: int
    source_file: str | None = None
    _location: SourceLocation | None = field(default=None, repr=False, compare=False)

    @property
    def location(self) -> SourceLocation:
        """SourceLocation for this token, built on first access."""
        if self._location is None:
            loc = SourceLocation(
                lineno=self.lineno,
                col_offset=self.col,
                offset=self.position,
                end_offset=self.end_position,
                end_lineno=self.end_lineno,
                end_col_offset=self.end_col,
                source_file=self.source_file,
            )
            object.__setattr__(self, "_location", loc)
        return self._location

    @property
    def kind(self) -> TokenType:
        """Alias for ``type``."""
        return self.type

    @property
    def text(self) -> str:
        """Alias for ``value``: the exact slice of the message."""
        return self.value

    def __repr__(self) -> str:
        val = self.value if len(self.value) <= 20 else self.value[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"

"""Lexer operating modes and character classes.

This module defines the finite state machine modes for the lexer
and the character sets used to split words.
"""

from __future__ import annotations

from enum import Enum, auto

from convcommit.tokens import TokenType


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - HEADER: Header line up to the first colon (type, scope, marker)
    - DESCRIPTION: Rest of the header line after the first colon
    - BODY: Every line after the header (body paragraphs and footers)

    """

    HEADER = auto()
    DESCRIPTION = auto()
    BODY = auto()


# Characters with their own token type on the header line
STRUCTURAL_CHARS: dict[str, TokenType] = {
    ":": TokenType.COLON,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "!": TokenType.BANG,
    "#": TokenType.HASH,
}

# Horizontal whitespace (collapsed into a single WHITESPACE token)
INLINE_SPACE = frozenset(" \t")

# Characters that end a WORD ("\r" only when it starts "\r\n")
WORD_BREAK = frozenset(STRUCTURAL_CHARS) | INLINE_SPACE | {"\n"}

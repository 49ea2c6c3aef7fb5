"""Token navigation utilities for the convcommit parser.

Provides mixin for token stream navigation and error construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from convcommit.errors import ParseError, ParseErrorKind
from convcommit.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens))
        - _pos: int
        - _current: Token | None
        - _source_file: str | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None
    _source_file: str | None

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current is None or self._current.type == TokenType.EOF

    def _at(self, *token_types: TokenType) -> bool:
        """Check whether the current token has one of the given types."""
        return self._current is not None and self._current.type in token_types

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    def _expect(self, token_type: TokenType, kind: ParseErrorKind, message: str) -> Token:
        """Consume the current token if it has the given type, else raise."""
        token = self._current
        if token is None or token.type != token_type:
            raise self._error(kind, message, token)
        self._advance()
        return token

    def _error(
        self,
        kind: ParseErrorKind,
        message: str,
        token: Token | None = None,
    ) -> ParseError:
        """Build a ParseError located at token (or the end of the stream)."""
        if token is None and self._tokens_len:
            token = self._tokens[-1]
        if token is None:
            return ParseError(message, kind, position=0, source_file=self._source_file)
        return ParseError(
            message,
            kind,
            position=token.position,
            lineno=token.lineno,
            col_offset=token.col,
            source_file=self._source_file,
        )

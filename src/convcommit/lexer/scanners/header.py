"""Header line scanner mixin (HEADER and DESCRIPTION modes)."""

from collections.abc import Iterator

from convcommit.lexer.modes import INLINE_SPACE, STRUCTURAL_CHARS, LexerMode
from convcommit.tokens import Token, TokenType


class HeaderScannerMixin:
    """Mixin providing header line scanning logic.

    HEADER mode splits ``type(scope)!`` into words and structural tokens.
    The first colon switches to DESCRIPTION mode, where the rest of the
    line is one TEXT token.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _mode: LexerMode

    def _at_line_break(self) -> bool:
        """Check for a line break at the current position."""
        raise NotImplementedError

    def _scan_line_break(self) -> Iterator[Token]:
        """Emit NEWLINE or BLANK_LINE. Implemented by Lexer."""
        raise NotImplementedError

    def _find_line_end(self) -> int:
        """Find end of current line."""
        raise NotImplementedError

    def _skip_inline_space(self, pos: int) -> int:
        """Return first position at or after pos that isn't a space/tab."""
        raise NotImplementedError

    def _find_word_end(self, pos: int) -> int:
        """Return the end of the word starting at pos."""
        raise NotImplementedError

    def _emit(self, token_type: TokenType, end: int) -> Token:
        """Consume source up to end as one token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_header(self) -> Iterator[Token]:
        """Scan one token of the header line before the first colon.

        Yields:
            WORD, WHITESPACE or a structural token; or a line break.
        """
        if self._at_line_break():
            yield from self._scan_line_break()
            return

        char = self._source[self._pos]
        token_type = STRUCTURAL_CHARS.get(char)
        if token_type is not None:
            if token_type is TokenType.COLON:
                self._mode = LexerMode.DESCRIPTION
            yield self._emit(token_type, self._pos + 1)
        elif char in INLINE_SPACE:
            yield self._emit(TokenType.WHITESPACE, self._skip_inline_space(self._pos))
        else:
            yield self._emit(TokenType.WORD, self._find_word_end(self._pos))

    def _scan_description(self) -> Iterator[Token]:
        """Scan the description part of the header line.

        Yields:
            Leading WHITESPACE, then the rest of the line as TEXT;
            or a line break.
        """
        if self._at_line_break():
            yield from self._scan_line_break()
            return

        if self._source[self._pos] in INLINE_SPACE:
            yield self._emit(TokenType.WHITESPACE, self._skip_inline_space(self._pos))
        else:
            yield self._emit(TokenType.TEXT, self._find_line_end())

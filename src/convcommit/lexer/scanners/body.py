"""Body mode scanner mixin."""

from collections.abc import Iterator

from convcommit.nodes import SeparatorKind
from convcommit.tokens import Token, TokenType


class BodyScannerMixin:
    """Mixin providing body mode scanning logic.

    Every line after the header is either a footer line, split into key,
    separator and value tokens, or a free-form TEXT line.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int

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

    def _emit(self, token_type: TokenType, end: int) -> Token:
        """Consume source up to end as one token. Implemented by Lexer."""
        raise NotImplementedError

    def _classify_footer(self, line: str) -> tuple[int, SeparatorKind] | None:
        """Classify a line as a footer. Implemented by FooterClassifierMixin."""
        raise NotImplementedError

    def _scan_body_line(self) -> Iterator[Token]:
        """Scan one body line (or the line break after it).

        Yields:
            Footer tokens (WORD, separator tokens, optional TEXT value),
            a single TEXT token, or a line break.
        """
        if self._at_line_break():
            yield from self._scan_line_break()
            return

        line_end = self._find_line_end()
        footer = self._classify_footer(self._source[self._pos : line_end])
        if footer is None:
            yield self._emit(TokenType.TEXT, line_end)
            return

        key_len, separator_kind = footer
        yield self._emit(TokenType.WORD, self._pos + key_len)
        if separator_kind is SeparatorKind.COLON_SPACE:
            yield self._emit(TokenType.COLON, self._pos + 1)
            yield self._emit(TokenType.WHITESPACE, self._skip_inline_space(self._pos))
        else:
            yield self._emit(TokenType.WHITESPACE, self._pos + 1)
            yield self._emit(TokenType.HASH, self._pos + 1)

        if self._pos < line_end:
            yield self._emit(TokenType.TEXT, line_end)

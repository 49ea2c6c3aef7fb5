"""State-machine lexer for Conventional Commits messages.

Single left-to-right scan with an explicit mode (HEADER, DESCRIPTION,
BODY) carried alongside the cursor. Every character of the input ends up
in exactly one token, so joining token values reproduces the message.

Thread Safety:
Lexer instances are single-use. Create one per message.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from convcommit.errors import LexError
from convcommit.lexer.classifiers import FooterClassifierMixin
from convcommit.lexer.modes import INLINE_SPACE, WORD_BREAK, LexerMode
from convcommit.lexer.scanners import BodyScannerMixin, HeaderScannerMixin
from convcommit.tokens import Token, TokenType
from convcommit.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no position mutation)
    FooterClassifierMixin,
    # Scanners (mode-specific scanning logic)
    HeaderScannerMixin,
    BodyScannerMixin,
):
    """State-machine lexer for commit messages.

    Usage:
            >>> lexer = Lexer("fix(ui)!: align buttons")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(WORD, 'fix', 1:1)
        Token(OPEN_PAREN, '(', 1:4)
        Token(WORD, 'ui', 1:5)
        Token(CLOSE_PAREN, ')', 1:7)
        Token(BANG, '!', 1:8)
        Token(COLON, ':', 1:9)
        Token(WHITESPACE, ' ', 1:10)
        Token(TEXT, 'align buttons', 1:11)
        Token(EOF, '', 1:24)

    Thread Safety:
        Lexer instances are single-use. Create one per message.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_mode",
        "_source_file",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Raw commit message (may be empty)
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._mode = LexerMode.HEADER
        self._source_file = source_file

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with a single EOF token.

        Raises:
            LexError: If a scan step fails to advance the cursor.
        """
        source_len = self._source_len
        while self._pos < source_len:
            start = self._pos
            yield from self._dispatch_mode()
            if self._pos == start:
                raise LexError(
                    f"no progress scanning {self._source[start]!r} in {self._mode.name} mode",
                    position=start,
                    lineno=self._lineno,
                    col_offset=self._col,
                    source_file=self._source_file,
                )

        yield self._emit(TokenType.EOF, self._pos)

    def lex(self) -> tuple[Token, ...]:
        """Tokenize the whole message at once.

        Returns:
            Tuple of tokens ending with EOF.
        """
        tokens = tuple(self.tokenize())
        logger.debug("Lexed %d tokens from %d characters", len(tokens), self._source_len)
        return tokens

    def _dispatch_mode(self) -> Iterator[Token]:
        """Dispatch to appropriate scanner based on current mode.

        Yields:
            Token objects from the mode-specific scanner.
        """
        if self._mode == LexerMode.HEADER:
            yield from self._scan_header()
        elif self._mode == LexerMode.DESCRIPTION:
            yield from self._scan_description()
        elif self._mode == LexerMode.BODY:
            yield from self._scan_body_line()

    # =========================================================================
    # Window navigation helpers
    # =========================================================================

    def _line_break_len(self, pos: int) -> int:
        """Length of the line break at pos: 1 for \\n, 2 for \\r\\n, else 0."""
        if pos >= self._source_len:
            return 0
        char = self._source[pos]
        if char == "\n":
            return 1
        if char == "\r" and self._source.startswith("\n", pos + 1):
            return 2
        return 0

    def _at_line_break(self) -> bool:
        """Check for a line break at the current position."""
        return self._line_break_len(self._pos) > 0

    def _find_line_end(self) -> int:
        """Find the end of the current line (start of its line break, or EOF).

        Returns:
            Position of the line break or end of source.
        """
        idx = self._source.find("\n", self._pos)
        if idx == -1:
            return self._source_len
        if idx > self._pos and self._source[idx - 1] == "\r":
            return idx - 1
        return idx

    def _skip_inline_space(self, pos: int) -> int:
        """Return first position at or after pos that isn't a space or tab."""
        while pos < self._source_len and self._source[pos] in INLINE_SPACE:
            pos += 1
        return pos

    def _find_word_end(self, pos: int) -> int:
        """Return the end of the word starting at pos.

        The character at pos is always consumed, so a lone carriage
        return still makes progress.
        """
        pos += 1
        while pos < self._source_len:
            if self._source[pos] in WORD_BREAK or self._line_break_len(pos):
                break
            pos += 1
        return pos

    def _commit_to(self, end: int) -> None:
        """Commit position to end, updating line/column tracking.

        Args:
            end: Position to commit to.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)
        self._pos = end

    # =========================================================================
    # Line breaks (shared by all modes)
    # =========================================================================

    def _scan_line_break(self) -> Iterator[Token]:
        """Scan a line break and any blank lines following it.

        A break followed by whitespace-only lines (or by whitespace up to
        end of input) is a BLANK_LINE covering the whole run; a lone break
        is a NEWLINE. Either way the header line is over.

        Yields:
            One NEWLINE or BLANK_LINE token.
        """
        end = self._pos + self._line_break_len(self._pos)
        breaks = 1
        while True:
            probe = self._skip_inline_space(end)
            if probe >= self._source_len:
                end = probe
                breaks += 1
                break
            break_len = self._line_break_len(probe)
            if not break_len:
                break
            end = probe + break_len
            breaks += 1

        self._mode = LexerMode.BODY
        token_type = TokenType.BLANK_LINE if breaks > 1 else TokenType.NEWLINE
        yield self._emit(token_type, end)

    # =========================================================================
    # Token construction
    # =========================================================================

    def _emit(self, token_type: TokenType, end: int) -> Token:
        """Consume source from the cursor up to end as one token.

        An empty span (end == cursor) produces a zero-width token, which is
        how EOF is emitted.
        """
        start, lineno, col = self._pos, self._lineno, self._col
        self._commit_to(end)
        return Token(
            type=token_type,
            value=self._source[start:end],
            position=start,
            end_position=end,
            lineno=lineno,
            col=col,
            end_lineno=self._lineno,
            end_col=self._col,
            source_file=self._source_file,
        )


def lex(message: str, source_file: str | None = None) -> tuple[Token, ...]:
    """Tokenize a commit message.

    Args:
        message: Raw commit message
        source_file: Optional source file path for error messages

    Returns:
        Tuple of tokens ending with EOF.

    Raises:
        LexError: On an internal scanning failure (no forward progress).
    """
    return Lexer(message, source_file).lex()

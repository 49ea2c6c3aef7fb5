"""State-machine parser producing a typed Commit.

Consumes the token stream from Lexer and builds a frozen Commit node.
One read cursor, one token of lookahead, no backtracking.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal and error construction
- `HeaderParsingMixin`: ``type(scope)!: description``
- `BodyParsingMixin`: Body paragraphs and trailing footers

Each grammar state is a ParserState value; the main loop hands the
current state to its handler, which returns the next state.

Thread Safety:
- Parser produces an immutable Commit (frozen dataclass)
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from convcommit.config import ParseConfig, get_parse_config
from convcommit.errors import ParseError
from convcommit.location import SourceLocation
from convcommit.nodes import Commit
from convcommit.parsing import (
    BodyParsingMixin,
    HeaderParsingMixin,
    ParserState,
    PendingFooter,
    TokenNavigationMixin,
)
from convcommit.tokens import Token
from convcommit.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    HeaderParsingMixin,
    BodyParsingMixin,
):
    """Parser for Conventional Commits token streams.

    Usage:
            >>> from convcommit.lexer import lex
            >>> Parser(lex("fix(ui): align buttons")).parse()
        Commit(location=..., commit_type='fix', description='align buttons',
               scope='ui', is_breaking=False, body=None, footers=())

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting Commit is immutable and thread-safe.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_source_file",
        # Header state
        "_commit_type",
        "_scope",
        "_breaking_marker",
        "_description",
        # Body state
        "_paragraphs",
        "_footers",
    )

    def __init__(self, tokens: Sequence[Token], source_file: str | None = None) -> None:
        """Initialize parser with a token stream.

        Args:
            tokens: Tokens produced by the lexer (normally ending with EOF)
            source_file: Optional source file path for error messages
        """
        self._tokens = tokens
        self._tokens_len = len(tokens)
        self._pos = 0
        self._current: Token | None = tokens[0] if tokens else None
        self._source_file = source_file

        self._commit_type: str | None = None
        self._scope: str | None = None
        self._breaking_marker = False
        self._description: str | None = None

        self._paragraphs: list[list[str]] = []
        self._footers: list[PendingFooter] = []

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> Commit:
        """Parse the token stream into a Commit.

        Returns:
            The parsed Commit.

        Raises:
            ParseError: If the tokens violate the commit grammar. No partial
                Commit is ever produced.
        """
        handlers = self._state_handlers()
        state = ParserState.START
        while state is not ParserState.DONE:
            state = handlers[state]()
        return self._finish()

    def _state_handlers(self) -> dict[ParserState, Callable[[], ParserState]]:
        """Map each non-terminal state to its handler."""
        return {
            ParserState.START: self._parse_start,
            ParserState.AFTER_TYPE: self._parse_after_type,
            ParserState.IN_SCOPE: self._parse_in_scope,
            ParserState.AFTER_MARKER: self._parse_after_marker,
            ParserState.AFTER_COLON: self._parse_after_colon,
            ParserState.HEADER_DONE: self._parse_header_done,
            ParserState.BODY_OR_FOOTER: self._parse_body_or_footer,
        }

    def _finish(self) -> Commit:
        """Assemble the Commit from the collected header, body and footers."""
        footers = tuple(pending.build() for pending in self._footers)
        is_breaking = self._breaking_marker or any(f.is_breaking_change for f in footers)
        body = "\n\n".join("\n".join(lines) for lines in self._paragraphs).rstrip()

        # START and AFTER_COLON guarantee both are set before DONE
        assert self._commit_type is not None and self._description is not None
        return Commit(
            location=self._span(),
            commit_type=self._commit_type,
            description=self._description,
            scope=self._scope,
            is_breaking=is_breaking,
            body=body or None,
            footers=footers,
        )

    def _span(self) -> SourceLocation:
        """Location covering the whole token stream (never empty once parsed)."""
        return self._tokens[0].location.span_to(self._tokens[-1].location)


def parse_commit(tokens: Sequence[Token], source_file: str | None = None) -> Commit:
    """Parse a token sequence into a Commit.

    Args:
        tokens: Tokens produced by ``lex()``
        source_file: Optional source file path for error messages

    Returns:
        The parsed Commit.

    Raises:
        ParseError: If the tokens violate the commit grammar.
    """
    try:
        commit = Parser(tokens, source_file).parse()
    except ParseError as err:
        logger.debug("Rejected commit message (%s): %s", err.kind.value, err)
        raise
    logger.debug(
        "Parsed %s commit with %d footer(s)", commit.commit_type, len(commit.footers)
    )
    return commit

"""Header line parsing: ``type(scope)!: description``."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from convcommit.errors import ParseError, ParseErrorKind
from convcommit.parsing.states import ParserState
from convcommit.tokens import Token, TokenType

if TYPE_CHECKING:
    from convcommit.config import ParseConfig

# Commit types are lowercase ascii words; hyphens allowed (e.g. "release-candidate")
_COMMIT_TYPE = re.compile(r"[a-z0-9-]+")

# Tokens that end the header line before a scope was closed
_SCOPE_TERMINATORS = (
    TokenType.COLON,
    TokenType.NEWLINE,
    TokenType.BLANK_LINE,
    TokenType.EOF,
)


class HeaderParsingMixin:
    """Mixin implementing the header states of the commit grammar.

    Each ``_parse_*`` method handles one ParserState, consumes tokens and
    returns the next state.

    Required Host Attributes:
        - _current: Token | None
        - _commit_type, _scope, _description: str | None
        - _breaking_marker: bool
        - _config: ParseConfig

    """

    _current: Token | None
    _commit_type: str | None
    _scope: str | None
    _description: str | None
    _breaking_marker: bool
    _config: ParseConfig

    def _at(self, *token_types: TokenType) -> bool:
        """Check the current token type. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _advance(self) -> Token | None:
        """Advance to next token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _expect(self, token_type: TokenType, kind: ParseErrorKind, message: str) -> Token:
        """Consume a token of the given type. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _error(
        self,
        kind: ParseErrorKind,
        message: str,
        token: Token | None = None,
    ) -> ParseError:
        """Build a located ParseError. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _parse_start(self) -> ParserState:
        """Parse the commit type word."""
        token = self._current
        if token is None or token.type != TokenType.WORD:
            raise self._error(
                ParseErrorKind.MISSING_TYPE,
                "commit message must start with a type (e.g. 'feat')",
                token,
            )
        if not _COMMIT_TYPE.fullmatch(token.value):
            raise self._error(
                ParseErrorKind.INVALID_TYPE,
                f"invalid commit type {token.value!r}: "
                "use lowercase letters, digits and '-'",
                token,
            )
        self._commit_type = token.value
        self._advance()
        return ParserState.AFTER_TYPE

    def _parse_after_type(self) -> ParserState:
        """Parse what follows the type (or the scope): ``(``, ``!`` or ``:``."""
        token = self._current
        if token is not None:
            if token.type == TokenType.OPEN_PAREN and self._scope is None:
                self._advance()
                return ParserState.IN_SCOPE
            if token.type == TokenType.BANG:
                self._breaking_marker = True
                self._advance()
                return ParserState.AFTER_MARKER
            if token.type == TokenType.COLON:
                self._advance()
                return ParserState.AFTER_COLON

        if self._scope is None:
            message = "expected '(', '!' or ':' after commit type"
        else:
            message = "expected '!' or ':' after scope"
        raise self._error(ParseErrorKind.UNEXPECTED_TOKEN, message, token)

    def _parse_in_scope(self) -> ParserState:
        """Parse scope content up to the closing parenthesis."""
        parts: list[str] = []
        while True:
            token = self._current
            if token is None or token.type in _SCOPE_TERMINATORS:
                raise self._error(
                    ParseErrorKind.UNCLOSED_SCOPE,
                    "scope is missing its closing ')'",
                    token,
                )
            if token.type == TokenType.CLOSE_PAREN:
                break
            if token.type not in (TokenType.WORD, TokenType.WHITESPACE):
                raise self._error(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    f"unexpected {token.value!r} inside scope",
                    token,
                )
            parts.append(token.value)
            self._advance()

        scope = "".join(parts).strip()
        if not scope:
            raise self._error(ParseErrorKind.UNEXPECTED_TOKEN, "scope must not be empty", token)
        self._scope = scope
        self._advance()
        return ParserState.AFTER_TYPE

    def _parse_after_marker(self) -> ParserState:
        """Parse the colon required after a ``!`` marker."""
        self._expect(
            TokenType.COLON,
            ParseErrorKind.MISSING_COLON,
            "expected ':' after breaking-change marker '!'",
        )
        return ParserState.AFTER_COLON

    def _parse_after_colon(self) -> ParserState:
        """Parse the space and description after the colon."""
        spaced = self._at(TokenType.WHITESPACE)
        if spaced:
            self._advance()

        token = self._current
        description = token.value.strip() if token is not None and token.type == TokenType.TEXT else ""
        if not description:
            raise self._error(
                ParseErrorKind.MISSING_DESCRIPTION,
                "missing description after ':'",
                token,
            )
        if not spaced:
            raise self._error(
                ParseErrorKind.UNEXPECTED_TOKEN,
                "expected a space between ':' and the description",
                token,
            )

        self._check_header_length(token)
        self._description = description
        self._advance()
        return ParserState.HEADER_DONE

    def _check_header_length(self, description_token: Token) -> None:
        """Enforce the configured header length limit."""
        limit = self._config.max_header_length
        if limit is None:
            return
        # The header always starts at offset 0
        length = description_token.position + len(description_token.value.rstrip())
        if length > limit:
            raise self._error(
                ParseErrorKind.HEADER_TOO_LONG,
                f"header is {length} characters long (limit {limit})",
                description_token,
            )

    def _parse_header_done(self) -> ParserState:
        """Parse the end of the header line."""
        token = self._current
        if token is None or token.type == TokenType.EOF:
            return ParserState.DONE
        if token.type == TokenType.BLANK_LINE:
            self._advance()
            return ParserState.BODY_OR_FOOTER
        raise self._error(
            ParseErrorKind.UNEXPECTED_TOKEN,
            "header must be followed by a blank line before the body",
            token,
        )

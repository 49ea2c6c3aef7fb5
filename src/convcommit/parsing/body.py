"""Body and footer parsing.

Lines after the header's blank line are body paragraphs until the first
footer line; from then on every line is a new footer or a continuation
of the previous footer's value. Footers therefore form a trailing block.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from convcommit.errors import ParseError, ParseErrorKind
from convcommit.location import SourceLocation
from convcommit.nodes import Footer, SeparatorKind
from convcommit.parsing.states import ParserState
from convcommit.tokens import Token, TokenType


@dataclass(slots=True)
class PendingFooter:
    """Footer under construction (value may still grow)."""

    key_token: Token
    separator_kind: SeparatorKind
    lines: list[str] = field(default_factory=list)
    end: SourceLocation | None = None

    def extend(self, text: str, after_blank: bool) -> None:
        """Append a continuation line, keeping a paragraph break if needed."""
        if after_blank:
            self.lines.append("")
        self.lines.append(text)

    def build(self) -> Footer:
        """Freeze into a Footer node."""
        value = "\n".join(line.rstrip() for line in self.lines).strip()
        location = self.key_token.location
        if self.end is not None:
            location = location.span_to(self.end)
        return Footer(
            location=location,
            key=self.key_token.value,
            separator_kind=self.separator_kind,
            value=value,
        )


class BodyParsingMixin:
    """Mixin implementing the BODY_OR_FOOTER state.

    Required Host Attributes:
        - _current: Token | None
        - _paragraphs: list[list[str]]
        - _footers: list[PendingFooter]

    """

    _current: Token | None
    _paragraphs: list[list[str]]
    _footers: list[PendingFooter]

    def _at_end(self) -> bool:
        """Check if at end of token stream. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

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

    def _parse_body_or_footer(self) -> ParserState:
        """Parse body paragraphs and the trailing footer block."""
        after_blank = False
        while not self._at_end():
            token = self._current
            assert token is not None  # _at_end() covers None
            if token.type == TokenType.BLANK_LINE:
                after_blank = True
                self._advance()
                continue
            if token.type == TokenType.NEWLINE:
                self._advance()
                continue

            if token.type == TokenType.WORD:
                self._footers.append(self._parse_footer_line())
            elif token.type == TokenType.TEXT:
                self._advance()
                self._add_text_line(token, after_blank)
            else:
                raise self._error(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    f"unexpected {token.value!r} in commit body",
                    token,
                )
            after_blank = False

        return ParserState.DONE

    def _add_text_line(self, token: Token, after_blank: bool) -> None:
        """Route a free-form line to the body or the open footer."""
        if self._footers:
            footer = self._footers[-1]
            footer.extend(token.value, after_blank)
            footer.end = token.location
        elif after_blank or not self._paragraphs:
            self._paragraphs.append([token.value])
        else:
            self._paragraphs[-1].append(token.value)

    def _parse_footer_line(self) -> PendingFooter:
        """Parse ``key: value`` or ``key #value``."""
        key_token = self._expect(
            TokenType.WORD, ParseErrorKind.UNEXPECTED_TOKEN, "expected footer key"
        )
        if self._at(TokenType.COLON):
            self._advance()
            last = self._expect(
                TokenType.WHITESPACE,
                ParseErrorKind.UNEXPECTED_TOKEN,
                "expected a space after footer key ':'",
            )
            separator_kind = SeparatorKind.COLON_SPACE
        else:
            self._expect(
                TokenType.WHITESPACE,
                ParseErrorKind.UNEXPECTED_TOKEN,
                "expected ': ' or ' #' after footer key",
            )
            last = self._expect(
                TokenType.HASH,
                ParseErrorKind.UNEXPECTED_TOKEN,
                "expected '#' after footer key",
            )
            separator_kind = SeparatorKind.SPACE_HASH

        footer = PendingFooter(key_token, separator_kind, end=last.location)
        value = self._current
        if value is not None and value.type == TokenType.TEXT:
            self._advance()
            footer.lines.append(value.value)
            footer.end = value.location
        else:
            footer.lines.append("")
        return footer

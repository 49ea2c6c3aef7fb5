"""Tests for accurate source location tracking in the lexer.

Token positions feed every parse error, so line numbers, column
offsets and character offsets must be exact.
"""

import pytest

from convcommit.lexer import Lexer, lex
from convcommit.tokens import TokenType


class TestSingleLineLocations:
    """Test location tracking on the header line."""

    def test_type_location(self) -> None:
        token = lex("feat: x")[0]

        assert token.location.lineno == 1
        assert token.location.col_offset == 1
        assert token.position == 0

    def test_open_paren_location(self) -> None:
        paren = lex("fix(ui): x")[1]

        assert paren.type == TokenType.OPEN_PAREN
        assert paren.position == 3
        assert paren.col == 4

    def test_eof_at_end_of_input(self) -> None:
        source = "docs: update readme"
        eof = lex(source)[-1]

        assert eof.type == TokenType.EOF
        assert eof.position == len(source)
        assert eof.col == len(source) + 1


class TestMultilineLocations:
    """Test location tracking across line breaks."""

    def test_body_line_numbers(self) -> None:
        tokens = lex("feat: x\n\nfirst\nsecond")
        texts = [t for t in tokens if t.type == TokenType.TEXT]

        assert [t.lineno for t in texts] == [1, 3, 4]
        assert all(t.col == 1 for t in texts[1:])

    def test_footer_tokens_share_line(self) -> None:
        tokens = lex("feat: x\n\nbody\n\nRefs: #1")
        key = next(t for t in tokens if t.type == TokenType.WORD and t.value == "Refs")
        value = tokens[tokens.index(key) + 3]

        assert key.lineno == 5
        assert value.lineno == 5
        assert value.col == 7

    def test_crlf_resets_column(self) -> None:
        tokens = lex("feat: x\r\n\r\nbody")
        body = tokens[-2]

        assert body.value == "body"
        assert body.lineno == 3
        assert body.col == 1

    def test_blank_line_end_location(self) -> None:
        blank = lex("feat: x\n\n\nbody")[4]

        assert blank.type == TokenType.BLANK_LINE
        assert blank.location.lineno == 1
        assert blank.location.end_lineno == 4
        assert blank.location.end_col_offset == 1


class TestSourceFile:
    """Test that source_file is carried to every token."""

    def test_source_file_propagates(self) -> None:
        tokens = list(Lexer("feat: x\n\nRefs: #1", source_file="COMMIT_EDITMSG").tokenize())

        assert all(t.location.source_file == "COMMIT_EDITMSG" for t in tokens)
        assert str(tokens[0].location) == "COMMIT_EDITMSG:1:1"


class TestTokenAliases:
    """kind/text read the same data as type/value."""

    def test_kind_and_text(self) -> None:
        tokens = lex("fix(ui): x")

        assert [t.kind for t in tokens] == [t.type for t in tokens]
        assert "".join(t.text for t in tokens) == "fix(ui): x"

    def test_aliases_are_read_only(self) -> None:
        token = lex("feat")[0]
        with pytest.raises(AttributeError):
            token.kind = TokenType.EOF  # type: ignore[misc]

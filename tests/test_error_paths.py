"""Error-path and malformed input tests.

Covers error construction and formatting, and the guarantee that
arbitrary input is either parsed or rejected with a convcommit error.
"""

import pytest

from convcommit import ConvCommitError, LexError, ParseError, ParseErrorKind, is_valid, parse

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token", ParseErrorKind.UNEXPECTED_TOKEN)
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.position is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", ParseErrorKind.MISSING_COLON, lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing type", ParseErrorKind.MISSING_TYPE, lineno=3, col_offset=5)
        assert str(err) == "3:5 missing type"

    def test_with_source_file(self) -> None:
        err = ParseError(
            "error",
            ParseErrorKind.INVALID_TYPE,
            position=0,
            lineno=1,
            col_offset=1,
            source_file="COMMIT_EDITMSG",
        )
        assert str(err) == "COMMIT_EDITMSG:1:1 error"
        assert err.message == "error"

    def test_kind_values(self) -> None:
        assert ParseErrorKind.UNCLOSED_SCOPE.value == "unclosed-scope"
        assert ParseErrorKind("header-too-long") is ParseErrorKind.HEADER_TOO_LONG

    def test_is_convcommit_error(self) -> None:
        assert isinstance(ParseError("x", ParseErrorKind.MISSING_TYPE), ConvCommitError)


class TestLexErrorFormatting:
    """Verify LexError formatting and hierarchy."""

    def test_position_and_location(self) -> None:
        err = LexError("stalled", position=7, lineno=2, col_offset=3)
        assert err.position == 7
        assert str(err) == "2:3 stalled"

    def test_is_convcommit_error(self) -> None:
        assert isinstance(LexError("x", position=0), ConvCommitError)
        assert not isinstance(LexError("x", position=0), ParseError)


# =========================================================================
# Malformed input
# =========================================================================


class TestMalformedInput:
    """Odd inputs are rejected cleanly."""

    @pytest.mark.parametrize(
        "message",
        [
            "\x00",
            "\r",
            "\r\r\n",
            "feat\r: x",
            ":::",
            "((((",
            "!!!",
            "#",
            "\t\t\n\n",
            "feat(\n",
            "🎉: party",
        ],
    )
    def test_rejected_with_parse_error(self, message: str) -> None:
        with pytest.raises(ParseError):
            parse(message)
        assert is_valid(message) is False

    def test_body_without_blank_line(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("feat: ok\nbody")

        # The line break after the header is the offending token
        assert exc_info.value.kind == ParseErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.position == 8
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (1, 9)

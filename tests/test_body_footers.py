"""Tests for body paragraphs, footers and breaking-change detection."""

import pytest

from convcommit import SeparatorKind, parse


class TestBody:
    """Free-form body text after the header."""

    def test_single_paragraph(self) -> None:
        commit = parse("feat: add a new feature\n\nThis feature allows parsing of commits.")

        assert commit.body == "This feature allows parsing of commits."
        assert commit.footers == ()

    def test_multiple_paragraphs(self) -> None:
        commit = parse("feat: x\n\npara one\nline two\n\n\npara two\n")

        assert commit.body == "para one\nline two\n\npara two"
        assert commit.paragraphs == ("para one\nline two", "para two")

    def test_indentation_preserved(self) -> None:
        commit = parse("feat: x\n\n  - item one\n  - item two")

        assert commit.body == "  - item one\n  - item two"

    def test_crlf_body(self) -> None:
        commit = parse("feat: x\r\n\r\nline one\r\nline two\r\n")

        assert commit.body == "line one\nline two"

    def test_no_body(self) -> None:
        commit = parse("feat: x")

        assert commit.body is None
        assert commit.paragraphs == ()


class TestFooters:
    """Trailing key/value footers."""

    def test_body_and_footer(self) -> None:
        commit = parse(
            "feat: add a new feature\n\n"
            "This feature allows parsing of commits.\n\n"
            "Reviewed-by: Alice"
        )

        assert commit.body == "This feature allows parsing of commits."
        assert len(commit.footers) == 1
        assert commit.footers[0].key == "Reviewed-by"
        assert commit.footers[0].value == "Alice"

    def test_footer_only(self) -> None:
        commit = parse("feat: add a new feature\n\nReviewed-by: Alice")

        assert commit.body is None
        assert str(commit.footers[0]) == "Reviewed-by: Alice"

    def test_separator_kinds_in_order(self) -> None:
        commit = parse("feat: x\n\nRefs: #123\nSee #456")

        assert [(f.key, f.separator_kind, f.value) for f in commit.footers] == [
            ("Refs", SeparatorKind.COLON_SPACE, "#123"),
            ("See", SeparatorKind.SPACE_HASH, "456"),
        ]
        assert commit.footers[1].separator == " #"

    def test_many_footers_keep_source_order(self) -> None:
        commit = parse(
            "chore: release\n\n"
            "Signed-off-by: A <a@example.com>\n"
            "Refs: #1\n"
            "Co-authored-by: B <b@example.com>\n"
            "Fixes #2"
        )

        assert [f.key for f in commit.footers] == [
            "Signed-off-by",
            "Refs",
            "Co-authored-by",
            "Fixes",
        ]

    def test_empty_footer_value(self) -> None:
        commit = parse("feat: x\n\nAcked-by: ")

        assert commit.footers[0].key == "Acked-by"
        assert commit.footers[0].value == ""

    def test_multiline_footer_value(self) -> None:
        commit = parse(
            "fix: x\n\nBREAKING CHANGE: first line\ncontinues here\nRefs: #1"
        )

        assert commit.footers[0].value == "first line\ncontinues here"
        assert commit.footers[1].key == "Refs"

    def test_footer_value_with_blank_line(self) -> None:
        commit = parse("fix: x\n\nBREAKING CHANGE: summary\n\nmore detail")

        assert commit.footers[0].value == "summary\n\nmore detail"
        assert commit.body is None

    def test_text_after_footer_continues_footer(self) -> None:
        """Footers are a trailing block: prose after one extends it."""
        commit = parse("feat: x\n\nbody\n\nRefs: #1\n\nlooks like body")

        assert commit.body == "body"
        assert commit.footers[0].value == "#1\n\nlooks like body"

    def test_footer_location(self) -> None:
        commit = parse("feat: x\n\nbody\n\nRefs: #1")

        assert commit.footers[0].location.lineno == 5
        assert commit.footers[0].location.col_offset == 1

    def test_footer_values_lookup(self) -> None:
        commit = parse("feat: x\n\nRefs: #1\nrefs: #2\nSee #3")

        assert commit.footer_values("REFS") == ("#1", "#2")
        assert commit.footer_values("missing") == ()


class TestBreakingChange:
    """Breaking-change signals from the marker and from footers."""

    def test_marker_and_footer(self) -> None:
        commit = parse(
            "fix!: correct critical bug in authentication flow\n\n"
            "BREAKING CHANGE: This changes the API.\n"
        )

        assert commit.commit_type == "fix"
        assert commit.scope is None
        assert commit.is_breaking is True
        assert commit.description == "correct critical bug in authentication flow"
        assert len(commit.footers) == 1
        assert commit.footers[0].key == "BREAKING CHANGE"
        assert commit.footers[0].value == "This changes the API."

    @pytest.mark.parametrize(
        "footer",
        [
            "BREAKING CHANGE: drops v1",
            "BREAKING-CHANGE: drops v1",
            "breaking change: drops v1",
            "Breaking-Change: drops v1",
            "BREAKING CHANGE #12",
        ],
    )
    def test_footer_without_marker(self, footer: str) -> None:
        commit = parse(f"feat: x\n\n{footer}")

        assert commit.is_breaking is True
        assert commit.footers[0].is_breaking_change is True

    def test_no_signal(self) -> None:
        commit = parse("feat: x\n\nBreaking news in the body.\n\nRefs: #1")

        assert commit.is_breaking is False
        assert commit.breaking_description is None

    def test_breaking_description_from_footer(self) -> None:
        commit = parse("feat!: x\n\nBREAKING CHANGE: config keys renamed")

        assert commit.breaking_description == "config keys renamed"

    def test_breaking_description_from_marker(self) -> None:
        assert parse("feat!: remove legacy flag").breaking_description == "remove legacy flag"

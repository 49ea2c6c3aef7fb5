"""Property-based tests for parse() using Hypothesis.

Well-formed messages built from random parts must parse back into the
same parts; arbitrary text must either parse or fail with a
ConvCommitError.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from convcommit import ConvCommitError, is_valid, parse

commit_types = st.from_regex(r"[a-z0-9-]+", fullmatch=True)
scopes = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABC0123456789-_,./", min_size=1, max_size=20)
descriptions = st.text(
    alphabet=st.characters(exclude_characters="\n\r"), min_size=1, max_size=80
).filter(lambda s: s == s.strip() and s != "")
footer_keys = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-", min_size=1, max_size=12).filter(
    lambda s: not s.startswith("-")
)


class TestHeaderRoundTrip:
    """Headers assembled from parts parse back into those parts."""

    @given(commit_types, st.none() | scopes, st.booleans(), descriptions)
    @settings(max_examples=200)
    def test_header_parts(
        self,
        commit_type: str,
        scope: str | None,
        breaking: bool,
        description: str,
    ) -> None:
        header = commit_type
        if scope is not None:
            header += f"({scope})"
        if breaking:
            header += "!"
        header += f": {description}"

        commit = parse(header)

        assert commit.commit_type == commit_type
        assert commit.scope == scope
        assert commit.is_breaking is breaking
        assert commit.description == description
        assert commit.body is None
        assert commit.footers == ()


class TestFooterOrder:
    """Footers come back in source order with their values."""

    @given(st.lists(footer_keys, min_size=1, max_size=8))
    @settings(max_examples=100)
    def test_order_preserved(self, keys: list[str]) -> None:
        lines = [f"{key}: value {i}" for i, key in enumerate(keys)]
        commit = parse("chore: x\n\n" + "\n".join(lines))

        assert [f.key for f in commit.footers] == keys
        assert [f.value for f in commit.footers] == [f"value {i}" for i in range(len(keys))]


class TestTotality:
    """parse() never fails with anything but a convcommit error."""

    @given(st.text(max_size=300))
    @settings(max_examples=300)
    def test_arbitrary_text(self, message: str) -> None:
        try:
            parse(message)
        except ConvCommitError:
            pass

    @given(st.text(alphabet=":()!# \n\rabfx-", max_size=60))
    @settings(max_examples=300)
    def test_is_valid_agrees_with_parse(self, message: str) -> None:
        try:
            parse(message)
        except ConvCommitError:
            accepted = False
        else:
            accepted = True

        assert is_valid(message) is accepted

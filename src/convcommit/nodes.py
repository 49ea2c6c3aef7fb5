"""Typed result nodes for convcommit.

All nodes are frozen dataclasses with slots for:
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
Node (base)
├── Commit
└── Footer

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from convcommit.location import SourceLocation

# Footer keys that flag a breaking change (compared case-insensitively)
BREAKING_CHANGE_KEYS = frozenset({"BREAKING CHANGE", "BREAKING-CHANGE"})


class SeparatorKind(Enum):
    """How a footer key is joined to its value."""

    COLON_SPACE = ": "  # Refs: #123
    SPACE_HASH = " #"  # See #456


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all result nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Footer(Node):
    """A trailing ``key: value`` or ``key #value`` line.

    Multi-line values keep their line breaks; a blank line inside a
    value is kept as an empty line.

    """

    key: str
    separator_kind: SeparatorKind
    value: str

    @property
    def separator(self) -> str:
        """Literal separator text between key and value."""
        return self.separator_kind.value

    @property
    def is_breaking_change(self) -> bool:
        """Whether this footer announces a breaking change."""
        return self.key.upper() in BREAKING_CHANGE_KEYS

    def __str__(self) -> str:
        return f"{self.key}{self.separator}{self.value}"


@dataclass(frozen=True, slots=True)
class Commit(Node):
    """A parsed Conventional Commits message.

    ``is_breaking`` is true when the header carried a ``!`` marker or any
    footer is a ``BREAKING CHANGE``/``BREAKING-CHANGE`` footer.

    Example:
        >>> from convcommit import parse
        >>> commit = parse("feat(api)!: drop v1 endpoints")
        >>> commit.commit_type, commit.scope, commit.is_breaking
        ('feat', 'api', True)

    """

    commit_type: str
    description: str
    scope: str | None = None
    is_breaking: bool = False
    body: str | None = None
    footers: tuple[Footer, ...] = ()

    @property
    def paragraphs(self) -> tuple[str, ...]:
        """Body split into paragraphs (empty tuple when there is no body)."""
        if self.body is None:
            return ()
        return tuple(self.body.split("\n\n"))

    @property
    def breaking_description(self) -> str | None:
        """Text describing the breaking change, if any.

        Uses the first breaking-change footer; falls back to the
        description when only the ``!`` marker was given.
        """
        for footer in self.footers:
            if footer.is_breaking_change:
                return footer.value
        if self.is_breaking:
            return self.description
        return None

    def footer_values(self, key: str) -> tuple[str, ...]:
        """Values of all footers whose key matches ``key`` (case-insensitive)."""
        wanted = key.casefold()
        return tuple(f.value for f in self.footers if f.key.casefold() == wanted)

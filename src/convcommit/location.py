"""Positions inside a commit message.

Tokens, parsed nodes and errors all point back into the message with a
SourceLocation, so tools can underline the offending text.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a token or node sits in the commit message.

    ``lineno`` and ``col_offset`` are 1-based, the way editors and git
    report them. ``offset`` and ``end_offset`` index the message string,
    so ``message[loc.offset:loc.end_offset]`` is the covered text.

    Example:
        >>> str(SourceLocation(2, 5, source_file="COMMIT_EDITMSG"))
        'COMMIT_EDITMSG:2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        prefix = f"{self.source_file}:" if self.source_file else ""
        return f"{prefix}{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Location running from this start to the end of ``end``."""
        return replace(
            self,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for nodes built by hand rather than parsed."""
        return cls(lineno=0, col_offset=0)

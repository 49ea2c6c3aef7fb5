"""Parse options, carried in a ContextVar.

The active ParseConfig is looked up by ``parse()`` and by the Parser,
so options reach the grammar without being threaded through every call.
Each thread (and each asyncio task) sees its own value.

Usage:
    from convcommit.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(max_header_length=72)):
        commit = parse(message)

    # One-off
    commit = parse(message, config=ParseConfig(strip_comments=True))

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Options that change what a parse accepts.

    Attributes:
        strip_comments: Drop comment lines before lexing, as git does for
            ``COMMIT_EDITMSG``
        comment_char: Leading character that marks a comment line
        max_header_length: Reject header lines longer than this many
            characters (None disables the check)

    Raises:
        ValueError: If ``comment_char`` is empty or ``max_header_length``
            is below 1.

    """

    strip_comments: bool = False
    comment_char: str = "#"
    max_header_length: int | None = None

    def __post_init__(self) -> None:
        if not self.comment_char:
            raise ValueError("comment_char must not be empty")
        if self.max_header_length is not None and self.max_header_length < 1:
            raise ValueError(
                f"max_header_length must be at least 1, got {self.max_header_length}"
            )

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "ParseConfig":
        """Build a config from a mapping such as a ``[tool.convcommit]`` table.

        Keys that aren't ParseConfig fields are ignored.

        Example:
            >>> ParseConfig.from_dict({"max_header_length": 72, "other": 1})
            ParseConfig(strip_comments=False, comment_char='#', max_header_length=72)
        """
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in options.items() if k in names})


_DEFAULT_CONFIG = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar("convcommit_parse_config", default=_DEFAULT_CONFIG)


def get_parse_config() -> ParseConfig:
    """Return the config active in the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Make ``config`` active for the rest of the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Go back to the default config."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[ParseConfig]:
    """Activate ``config`` for the duration of a ``with`` block.

    The previous config is restored on exit, including when the block
    raises.

    Example:
        >>> with parse_config_context(ParseConfig(max_header_length=50)):
        ...     get_parse_config().max_header_length
        50
    """
    token = _parse_config.set(config)
    try:
        yield config
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]

"""
convcommit: Conventional Commits parser for Python

Parses a single commit message into a typed Commit: type, optional scope,
breaking-change flag, description, optional body, and ordered footers.
Two stages, each usable on its own: a lossless lexer and a state-machine
parser that rejects malformed messages with a named reason.

Quick Start:
    >>> from convcommit import parse
    >>> commit = parse("feat(parser)!: add ability to parse arrays")
    >>> commit.commit_type, commit.scope, commit.is_breaking
    ('feat', 'parser', True)

    >>> # Or run the stages separately
    >>> from convcommit import lex, parse_commit
    >>> commit = parse_commit(lex("fix: handle empty input"))

Errors:
    >>> from convcommit import ParseError, ParseErrorKind
    >>> try:
    ...     parse("feat(ui):")
    ... except ParseError as err:
    ...     err.kind
    <ParseErrorKind.MISSING_DESCRIPTION: 'missing-description'>
"""

from convcommit.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from convcommit.errors import ConvCommitError, LexError, ParseError, ParseErrorKind
from convcommit.lexer import Lexer, LexerMode, lex
from convcommit.location import SourceLocation
from convcommit.nodes import Commit, Footer, Node, SeparatorKind
from convcommit.parser import Parser, parse_commit
from convcommit.serialization import from_dict, from_json, to_dict, to_json
from convcommit.text import strip_comments
from convcommit.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(
    message: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Commit:
    """Parse a commit message into a typed Commit.

    Args:
        message: Raw commit message
        source_file: Optional source file path for error messages
        config: Parse configuration; defaults to the active context config

    Returns:
        The parsed Commit.

    Raises:
        ParseError: If the message violates the Conventional Commits grammar.
        LexError: On an internal lexer failure.

    Example:
        >>> commit = parse("docs: fix typo\\n\\nRefs: #42")
        >>> commit.footers[0].value
        '#42'

        >>> # Git editor buffers carry comment lines
        >>> config = ParseConfig(strip_comments=True)
        >>> parse("fix: x\\n# Please enter...", config=config).description
        'x'
    """
    if config is None:
        config = get_parse_config()

    if config.strip_comments:
        message = strip_comments(message, config.comment_char)

    with parse_config_context(config):
        tokens = lex(message, source_file)
        return parse_commit(tokens, source_file)


def is_valid(
    message: str,
    *,
    config: ParseConfig | None = None,
) -> bool:
    """Check whether a message is a valid Conventional Commit.

    Args:
        message: Raw commit message
        config: Parse configuration; defaults to the active context config

    Returns:
        True if ``parse()`` accepts the message.
    """
    try:
        parse(message, config=config)
    except ConvCommitError:
        return False
    return True


__all__ = [
    # Main API
    "parse",
    "is_valid",
    "lex",
    "parse_commit",
    "__version__",
    # Pipeline
    "Lexer",
    "LexerMode",
    "Parser",
    "Token",
    "TokenType",
    # Results
    "Node",
    "Commit",
    "Footer",
    "SeparatorKind",
    "SourceLocation",
    # Errors
    "ConvCommitError",
    "LexError",
    "ParseError",
    "ParseErrorKind",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Text helpers
    "strip_comments",
]

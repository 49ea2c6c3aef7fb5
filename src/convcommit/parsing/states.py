"""Parser states for the commit grammar.

The parser threads one of these values through its main loop; each state
has a handler that consumes tokens and returns the next state.

    START ─► AFTER_TYPE ─┬─► IN_SCOPE ─► AFTER_TYPE
                         ├─► AFTER_MARKER ─► AFTER_COLON
                         └─► AFTER_COLON ─► HEADER_DONE ─┬─► DONE
                                                         └─► BODY_OR_FOOTER ─► DONE
"""

from __future__ import annotations

from enum import Enum, auto


class ParserState(Enum):
    """Current expectation of the commit parser."""

    START = auto()  # Expecting the type word
    AFTER_TYPE = auto()  # Expecting (, ! or :
    IN_SCOPE = auto()  # Inside (...)
    AFTER_MARKER = auto()  # After !, expecting :
    AFTER_COLON = auto()  # Expecting space + description
    HEADER_DONE = auto()  # Expecting EOF or blank line
    BODY_OR_FOOTER = auto()  # Body paragraphs, then footers
    DONE = auto()  # Terminal

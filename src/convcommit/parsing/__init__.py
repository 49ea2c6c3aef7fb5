"""Parsing mixins for the convcommit parser.

Provides:
- TokenNavigationMixin: token stream access and located errors
- HeaderParsingMixin: header states (type, scope, marker, description)
- BodyParsingMixin: body paragraphs and trailing footers
- ParserState: the grammar states threaded through the parser loop
"""

from convcommit.parsing.body import BodyParsingMixin, PendingFooter
from convcommit.parsing.header import HeaderParsingMixin
from convcommit.parsing.states import ParserState
from convcommit.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "BodyParsingMixin",
    "HeaderParsingMixin",
    "ParserState",
    "PendingFooter",
    "TokenNavigationMixin",
]

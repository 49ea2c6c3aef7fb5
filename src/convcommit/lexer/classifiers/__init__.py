"""Line classifiers for the convcommit lexer.

Classifiers are pure-logic mixins: they inspect a line and report what it
is without advancing the lexer.
"""

from __future__ import annotations

from convcommit.lexer.classifiers.footer import FooterClassifierMixin

__all__ = [
    "FooterClassifierMixin",
]

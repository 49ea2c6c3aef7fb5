"""Mode-specific scanners for the convcommit lexer.

Each scanner is a mixin that provides scanning logic for specific
lexer modes (HEADER and DESCRIPTION, BODY).
"""

from __future__ import annotations

from convcommit.lexer.scanners.body import BodyScannerMixin
from convcommit.lexer.scanners.header import HeaderScannerMixin

__all__ = [
    "BodyScannerMixin",
    "HeaderScannerMixin",
]

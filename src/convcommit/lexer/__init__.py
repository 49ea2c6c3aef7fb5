"""Modular state-machine lexer for convcommit.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, lex
├── core.py              # Lexer class (mixin composition + navigation)
├── modes.py             # LexerMode enum, character classes
├── classifiers/         # Pure line classification mixins
│   └── footer.py        # Footer key + separator detection
└── scanners/            # Mode-specific scanners
    ├── header.py        # HEADER and DESCRIPTION modes
    └── body.py          # BODY mode

Usage:
    >>> from convcommit.lexer import Lexer
    >>> lexer = Lexer("docs: fix typo\\n\\nRefs #12")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(WORD, 'docs', 1:1)
Token(COLON, ':', 1:5)
Token(WHITESPACE, ' ', 1:6)
Token(TEXT, 'fix typo', 1:7)
Token(BLANK_LINE, '\\n\\n', 1:15)
Token(WORD, 'Refs', 3:1)
Token(WHITESPACE, ' ', 3:5)
Token(HASH, '#', 3:6)
Token(TEXT, '12', 3:7)
Token(EOF, '', 3:9)

"""

from convcommit.lexer.core import Lexer, lex
from convcommit.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode", "lex"]

"""Modular state-machine lexer for the marklet converter.

The lexer reads the document line by line, classifies each line, and
yields a flat token stream. Two code modes carry state across lines.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + navigation)
├── modes.py             # LexerMode enum, fence and indent markers
├── classifiers/         # Line classification mixins
│   ├── heading.py       # # .. ###### headings
│   ├── list.py          # - and 1. list items
│   ├── quote.py         # > block quotes
│   └── fence.py         # ``` and 4-space code boundaries
└── scanners/            # Mode-specific scanners
    ├── block.py         # Block mode (main dispatch)
    ├── code.py          # Fenced and indented code modes
    └── inline.py        # Bold, italic, strike, inline code spans

Usage:
    >>> from marklet.lexer import Lexer
    >>> for token in Lexer("- one\\n- two").tokenize():
    ...     print(token)
Token(BULLET_LIST, 'one', 1)
Token(BULLET_LIST, 'two', 2)

"""

from marklet.lexer.core import Lexer
from marklet.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]

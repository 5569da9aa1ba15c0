"""Lexer operating modes and line-prefix constants.

This module defines the finite state machine modes for the lexer
and the markers that switch between them.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - BLOCK: Between code blocks, classifying each line
    - CODE_FENCE: Inside a ``` fenced code block
    - CODE_INDENT: Inside a run of 4-space indented lines

    Only one code mode is active at a time.

    """

    BLOCK = auto()
    CODE_FENCE = auto()
    CODE_INDENT = auto()


# Opens and closes a fenced code block (rest of the line is ignored)
FENCE_MARKER = "```"

# Prefix that starts or continues an indented code block
INDENT_PREFIX = "    "

"""Token and TokenKind definitions for the marklet lexer.

The lexer produces a flat stream of Token objects that the renderer consumes.
Each Token has a kind, a string value (marker already stripped), and the
line number that produced it.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    Organized by category:
    - Plain text (the remainder of a line after inline extraction)
    - Headings (levels 1-6)
    - Inline spans (italic, bold, strike, inline code)
    - List items (bulleted, numbered)
    - Code blocks and block quotes

    """

    # Plain text
    TEXT = auto()

    # Headings
    HEADER1 = auto()  # # Heading
    HEADER2 = auto()  # ## Heading
    HEADER3 = auto()  # ### Heading
    HEADER4 = auto()  # #### Heading
    HEADER5 = auto()  # #####Heading
    HEADER6 = auto()  # ######Heading

    # Inline spans
    ITALIC = auto()  # *x* or _x_
    BOLD = auto()  # **x** or __x__
    STRIKE = auto()  # ~~x~~

    # List items
    BULLET_LIST = auto()  # - item
    NUMBERED_LIST = auto()  # 1. item

    # Code
    CODE_BLOCK = auto()  # ``` fenced or 4-space indented
    CODE_INLINE = auto()  # `code`

    BLOCK_QUOTE = auto()  # > quote

    @property
    def is_list(self) -> bool:
        """True for the two list-item kinds."""
        return self is TokenKind.BULLET_LIST or self is TokenKind.NUMBERED_LIST

    @property
    def heading_level(self) -> int:
        """Heading level 1-6, or 0 for non-heading kinds."""
        return _HEADING_LEVELS.get(self, 0)


_HEADING_LEVELS: dict[TokenKind, int] = {
    TokenKind.HEADER1: 1,
    TokenKind.HEADER2: 2,
    TokenKind.HEADER3: 3,
    TokenKind.HEADER4: 4,
    TokenKind.HEADER5: 5,
    TokenKind.HEADER6: 6,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Tokens are the atomic units passed from lexer to renderer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        value: Payload with the Markdown marker stripped
        lineno: Source line that produced the token (1-indexed). For code
            blocks this is the line that opened the block. Excluded from
            comparison so tokens compare by (kind, value).

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenKind
    value: str
    lineno: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        name = getattr(self.kind, "name", self.kind)
        return f"Token({name}, {val!r}, {self.lineno})"

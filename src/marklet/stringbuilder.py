"""StringBuilder for O(n) HTML accumulation.

Appends to a list and joins once at the end, instead of repeated string
concatenation.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with tag helpers.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.wrap("b", "bold").append("</ul>")
            >>> sb.build()
            '<b>bold</b>\\n</ul>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def wrap(self, tag: str, content: str) -> StringBuilder:
        """Append ``<tag>content</tag>`` followed by newline.

        Content is written verbatim (no escaping).
        """
        self._parts.append(f"<{tag}>{content}</{tag}>\n")
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)


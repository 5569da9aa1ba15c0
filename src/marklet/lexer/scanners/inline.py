"""Inline span scanner mixin.

Extracts bold, italic, strikethrough and inline code spans from a line
that matched no block prefix.

Algorithm:
Each pass takes the first delimiter family (in priority order) that
occurs anywhere in the working line, finds its earliest opening
delimiter, then the first identical closing delimiter after it. The
span is yielded and spliced out of the working line, and the loop
repeats. An unterminated delimiter stops the scan; whatever is left
is yielded as one TEXT token.

"""

from __future__ import annotations

from collections.abc import Iterator

from marklet.tokens import Token, TokenKind

# Priority order. Delimiters within a family share a width.
_INLINE_FAMILIES: tuple[tuple[TokenKind, tuple[str, ...]], ...] = (
    (TokenKind.BOLD, ("**", "__")),
    (TokenKind.ITALIC, ("*", "_")),
    (TokenKind.STRIKE, ("~~",)),
    (TokenKind.CODE_INLINE, ("`",)),
)


def _earliest(line: str, delimiters: tuple[str, ...]) -> int:
    """Return the index of the first occurrence of any delimiter, or -1."""
    found = [idx for idx in (line.find(d) for d in delimiters) if idx != -1]
    return min(found) if found else -1


class InlineScannerMixin:
    """Mixin providing inline span scanning logic."""

    def _make_token(self, kind: TokenKind, value: str, lineno: int | None = None) -> Token:
        raise NotImplementedError

    def _scan_inline(self, line: str) -> Iterator[Token]:
        """Yield inline span tokens for a line, then its TEXT remainder.

        A line fully consumed by spans (or an empty line) yields no TEXT.
        """
        while True:
            for kind, delimiters in _INLINE_FAMILIES:
                start = _earliest(line, delimiters)
                if start != -1:
                    break
            else:
                break

            width = len(delimiters[0])
            delimiter = line[start : start + width]
            end = line.find(delimiter, start + width)
            if end == -1:
                break

            yield self._make_token(kind, line[start + width : end])
            line = line[:start] + line[end + width :]

        if line:
            yield self._make_token(TokenKind.TEXT, line)

"""List item classifier mixin."""

from __future__ import annotations

from marklet.tokens import Token, TokenKind


class ListClassifierMixin:
    """Mixin providing bulleted and numbered list item classification."""

    def _make_token(self, kind: TokenKind, value: str, lineno: int | None = None) -> Token:
        """Create token at the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_list_item(self, line: str) -> Token | None:
        """Try to classify line as a list item.

        Bulleted items start with "- ". Numbered items start with one or
        more ASCII digits followed by ". " (equivalent to ``^[0-9]+\\. ``).

        Returns:
            Token if the line is a list item, None otherwise.
        """
        if line.startswith("- "):
            return self._make_token(TokenKind.BULLET_LIST, line[2:].lstrip(" "))

        pos = 0
        while pos < len(line) and line[pos] in "0123456789":
            pos += 1
        if pos == 0 or not line.startswith(". ", pos):
            return None
        return self._make_token(TokenKind.NUMBERED_LIST, line[pos + 2 :].lstrip(" "))

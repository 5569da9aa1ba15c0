"""Heading classifier mixin."""

from marklet.tokens import Token, TokenKind

# Longest marker first. Levels 5 and 6 need no trailing space.
_HEADING_MARKERS: tuple[tuple[str, TokenKind], ...] = (
    ("######", TokenKind.HEADER6),
    ("#####", TokenKind.HEADER5),
    ("#### ", TokenKind.HEADER4),
    ("### ", TokenKind.HEADER3),
    ("## ", TokenKind.HEADER2),
    ("# ", TokenKind.HEADER1),
)


class HeadingClassifierMixin:
    """Mixin providing heading classification."""

    def _make_token(self, kind: TokenKind, value: str, lineno: int | None = None) -> Token:
        """Create token at the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_heading(self, line: str) -> Token | None:
        """Try to classify line as a heading.

        The marker and any spaces after it are stripped from the value;
        trailing text is kept verbatim.

        Args:
            line: Full line content

        Returns:
            Token if the line is a heading, None otherwise.
        """
        if not line.startswith("#"):
            return None

        for marker, kind in _HEADING_MARKERS:
            if line.startswith(marker):
                return self._make_token(kind, line[len(marker) :].lstrip(" "))
        return None

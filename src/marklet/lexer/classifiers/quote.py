"""Block quote classifier mixin."""

from marklet.tokens import Token, TokenKind


class QuoteClassifierMixin:
    """Mixin providing block quote classification.

    Quotes are single-line; nested quotes are not recognized.
    """

    def _make_token(self, kind: TokenKind, value: str, lineno: int | None = None) -> Token:
        """Create token at the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_block_quote(self, line: str) -> Token | None:
        if not line.startswith("> "):
            return None
        return self._make_token(TokenKind.BLOCK_QUOTE, line[2:].lstrip(" "))

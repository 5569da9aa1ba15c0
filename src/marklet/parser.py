"""Per-invocation parser pairing the lexer with the HTML renderer.

Thread Safety:
Parser instances own their token sequence and read cursor. Create one
per document; never share an instance between concurrent calls.
"""

from __future__ import annotations

from marklet.lexer import Lexer
from marklet.renderers.html import HtmlRenderer
from marklet.tokens import Token


class Parser:
    """Tokenize a document once and render it on demand.

    The source is tokenized eagerly in the constructor. parse() renders
    every token from the cursor onward and advances the cursor to the end,
    so a second call returns an empty string.

    Usage:
        >>> parser = Parser(b"# Title")
        >>> parser.tokens
        (Token(HEADER1, 'Title', 1),)
        >>> parser.parse()
        '<h1>Title</h1>\\n'

    """

    __slots__ = ("_tokens", "_current")

    def __init__(self, source: bytes | str) -> None:
        """Initialize parser with source.

        Args:
            source: Markdown document as UTF-8 bytes or text
        """
        self._tokens: tuple[Token, ...] = tuple(Lexer(source).tokenize())
        self._current = 0

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All tokens produced from the source."""
        return self._tokens

    @property
    def current(self) -> int:
        """Index of the next token to render."""
        return self._current

    def parse(self, renderer: HtmlRenderer | None = None) -> str:
        """Render remaining tokens to HTML.

        Args:
            renderer: Renderer to use (a default HtmlRenderer if None)

        Returns:
            HTML fragment for the tokens from the cursor to the end
        """
        remaining = self._tokens[self._current :]
        self._current = len(self._tokens)
        return (renderer or HtmlRenderer()).render(remaining)

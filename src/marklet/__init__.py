"""
marklet: a small Markdown to HTML fragment converter.

A two-stage pipeline: the lexer scans a document into a flat sequence of
typed tokens, and the renderer walks those tokens and emits HTML.

Supported syntax:
    # .. ###### headings, - and 1. list items, > block quotes,
    ``` fenced and 4-space indented code blocks,
    **bold** / __bold__, *italic* / _italic_, ~~strike~~, `code`

Quick Start:
    >>> from marklet import markdown_to_html
    >>> markdown_to_html(b"# Hello\\n**World**")
    '<h1>Hello</h1>\\n<b>World</b>\\n'

    >>> # Or use the reusable Markdown class
    >>> from marklet import Markdown
    >>> md = Markdown(close_lists_at_end=False)
    >>> md("- open")
    '<ul><li>open</li>\\n'

Output is not HTML-escaped; the caller owns sanitization.
"""

from collections.abc import Iterable

from marklet.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from marklet.lexer import Lexer, LexerMode
from marklet.parser import Parser
from marklet.renderers.html import HtmlRenderer
from marklet.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(source: bytes | str) -> tuple[Token, ...]:
    """Tokenize a Markdown document.

    Args:
        source: Markdown document as UTF-8 bytes or text

    Returns:
        Tokens in document order

    Example:
        >>> tokenize("*hi* there")
        (Token(ITALIC, 'hi', 1), Token(TEXT, ' there', 1))
    """
    return tuple(Lexer(source).tokenize())


def render(tokens: Iterable[Token], *, config: RenderConfig | None = None) -> str:
    """Render tokens to an HTML fragment.

    Args:
        tokens: Tokens in document order
        config: Render config (context-local config if None)

    Returns:
        HTML string
    """
    return HtmlRenderer(config=config).render(tokens)


def markdown_to_html(source: bytes | str, *, config: RenderConfig | None = None) -> str:
    """Convert a Markdown document to an HTML fragment in one call."""
    return Parser(source).parse(HtmlRenderer(config=config))


class Markdown:
    """Reusable Markdown converter combining lexer and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("## Section")
        '<h2>Section</h2>\\n'

        >>> tokens = md.tokenize("1. first")
        >>> md.render(tokens)
        '<ol><li>first</li>\\n</ol>'

    Thread Safety:
        Config is set per call via ContextVar and each call builds its own
        Parser, so one instance may be shared across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, close_lists_at_end: bool = True) -> None:
        """Initialize Markdown converter.

        Args:
            close_lists_at_end: Close a list still open at end of document
        """
        self._config = RenderConfig(close_lists_at_end=close_lists_at_end)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: bytes | str) -> str:
        """Convert source to HTML.

        Args:
            source: Markdown document as UTF-8 bytes or text

        Returns:
            HTML fragment
        """
        set_render_config(self._config)
        try:
            return Parser(source).parse()
        finally:
            reset_render_config()

    def convert_many(self, sources: Iterable[bytes | str]) -> list[str]:
        """Convert several documents, setting config once for the batch.

        Each document still gets its own Parser.
        """
        set_render_config(self._config)
        try:
            return [Parser(source).parse() for source in sources]
        finally:
            reset_render_config()

    def tokenize(self, source: bytes | str) -> tuple[Token, ...]:
        """Tokenize source without rendering."""
        return tokenize(source)

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens with this converter's config."""
        return HtmlRenderer(config=self._config).render(tokens)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "tokenize",
    "render",
    "markdown_to_html",
    "Markdown",
    "Parser",
    # Tokens
    "Token",
    "TokenKind",
    # Lexer / renderer
    "Lexer",
    "LexerMode",
    "HtmlRenderer",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]

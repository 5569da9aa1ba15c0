"""HTML renderer using StringBuilder pattern.

Walks a flat token stream and emits one markup fragment per token.
List grouping is reconstructed from runs of same-kind list tokens.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for
each render() call. Multiple threads can safely share a single
HtmlRenderer instance.

Values are written verbatim; no HTML escaping is applied.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from marklet.config import RenderConfig, get_render_config
from marklet.stringbuilder import StringBuilder
from marklet.tokens import Token, TokenKind
from marklet.utils.logger import get_logger

logger = get_logger(__name__)

# Kinds rendered as <tag>value</tag>; headings use h{level}
_WRAP_TAGS: dict[TokenKind, str] = {
    TokenKind.ITALIC: "i",
    TokenKind.BOLD: "b",
    TokenKind.STRIKE: "s",
    TokenKind.CODE_INLINE: "code",
    TokenKind.BLOCK_QUOTE: "blockquote",
}


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call.
    """

    in_bullet_list: bool = False
    in_numbered_list: bool = False
    last_list_lineno: int = 0  # Line of the previous item in the open list


class HtmlRenderer:
    """Render a token stream to an HTML fragment.

    Usage:
        >>> from marklet.lexer import Lexer
        >>> tokens = Lexer("- a\\n- b").tokenize()
        >>> HtmlRenderer().render(tokens)
        '<ul><li>a</li>\\n<li>b</li>\\n</ul>'

    Thread Safety:
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_config",)

    def __init__(self, *, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Explicit render config. When None, the context-local
                config is read at render time.
        """
        self._config = config

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to an HTML string.

        Args:
            tokens: Tokens in document order

        Returns:
            HTML fragment (empty string for no tokens)
        """
        config = self._config or get_render_config()
        ctx = RenderContext()
        sb = StringBuilder()

        for token in tokens:
            self._close_lists(token, sb, ctx)
            self._render_token(token, sb, ctx)

        if config.close_lists_at_end and (ctx.in_bullet_list or ctx.in_numbered_list):
            logger.debug("closing list left open at end of stream")
            self._close_lists(None, sb, ctx)

        return sb.build()

    def _close_lists(self, token: Token | None, sb: StringBuilder, ctx: RenderContext) -> None:
        """Close the open list if the next token does not continue it.

        A list item continues the open list only when it has the same kind
        and comes from the very next source line, so a blank line between
        items ends the list. Tokens without a line number (0) are treated
        as adjacent.
        """
        kind = token.kind if token is not None else None
        adjacent = token is not None and (
            not ctx.last_list_lineno
            or not token.lineno
            or token.lineno == ctx.last_list_lineno + 1
        )
        if ctx.in_bullet_list and (kind is not TokenKind.BULLET_LIST or not adjacent):
            ctx.in_bullet_list = False
            ctx.last_list_lineno = 0
            sb.append("</ul>")
        elif ctx.in_numbered_list and (kind is not TokenKind.NUMBERED_LIST or not adjacent):
            ctx.in_numbered_list = False
            ctx.last_list_lineno = 0
            sb.append("</ol>")

    def _render_token(self, token: Token, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render a single token."""
        match token.kind:
            case TokenKind.TEXT:
                sb.append_line(token.value)
            case TokenKind.CODE_BLOCK:
                sb.append("<pre><code>").append(token.value).append("</code></pre>\n")
            case TokenKind.BULLET_LIST:
                if not ctx.in_bullet_list:
                    ctx.in_bullet_list = True
                    sb.append("<ul>")
                ctx.last_list_lineno = token.lineno
                sb.wrap("li", token.value)
            case TokenKind.NUMBERED_LIST:
                if not ctx.in_numbered_list:
                    ctx.in_numbered_list = True
                    sb.append("<ol>")
                ctx.last_list_lineno = token.lineno
                sb.wrap("li", token.value)
            case (
                TokenKind.HEADER1
                | TokenKind.HEADER2
                | TokenKind.HEADER3
                | TokenKind.HEADER4
                | TokenKind.HEADER5
                | TokenKind.HEADER6
            ):
                sb.wrap(f"h{token.kind.heading_level}", token.value)
            case kind if kind in _WRAP_TAGS:
                sb.wrap(_WRAP_TAGS[kind], token.value)
            case _:
                logger.debug("skipping token of unknown kind %r", token.kind)

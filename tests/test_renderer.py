"""Tests for HtmlRenderer."""

from __future__ import annotations

import logging

import pytest

from marklet.config import RenderConfig
from marklet.renderers.html import HtmlRenderer
from marklet.tokens import Token, TokenKind


def render(*tokens: Token, **config: bool) -> str:
    return HtmlRenderer(config=RenderConfig(**config)).render(tokens)


class TestTokenMarkup:
    """Each kind maps to a fixed wrapper."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (TokenKind.TEXT, "x\n"),
            (TokenKind.HEADER1, "<h1>x</h1>\n"),
            (TokenKind.HEADER2, "<h2>x</h2>\n"),
            (TokenKind.HEADER3, "<h3>x</h3>\n"),
            (TokenKind.HEADER4, "<h4>x</h4>\n"),
            (TokenKind.HEADER5, "<h5>x</h5>\n"),
            (TokenKind.HEADER6, "<h6>x</h6>\n"),
            (TokenKind.ITALIC, "<i>x</i>\n"),
            (TokenKind.BOLD, "<b>x</b>\n"),
            (TokenKind.STRIKE, "<s>x</s>\n"),
            (TokenKind.CODE_INLINE, "<code>x</code>\n"),
            (TokenKind.CODE_BLOCK, "<pre><code>x</code></pre>\n"),
            (TokenKind.BLOCK_QUOTE, "<blockquote>x</blockquote>\n"),
        ],
    )
    def test_wrapper(self, kind: TokenKind, expected: str) -> None:
        assert render(Token(kind, "x")) == expected

    def test_empty_stream(self) -> None:
        assert render() == ""

    def test_no_escaping(self) -> None:
        assert render(Token(TokenKind.TEXT, "<script>&amp;")) == "<script>&amp;\n"

    def test_code_block_value_verbatim(self) -> None:
        token = Token(TokenKind.CODE_BLOCK, "a < b\n")
        assert render(token) == "<pre><code>a < b\n</code></pre>\n"


class TestListGrouping:
    """Consecutive same-kind list tokens share one list element."""

    def test_bullet_run(self) -> None:
        html = render(Token(TokenKind.BULLET_LIST, "a"), Token(TokenKind.BULLET_LIST, "b"))
        assert html == "<ul><li>a</li>\n<li>b</li>\n</ul>"

    def test_numbered_run(self) -> None:
        html = render(Token(TokenKind.NUMBERED_LIST, "a"), Token(TokenKind.NUMBERED_LIST, "b"))
        assert html == "<ol><li>a</li>\n<li>b</li>\n</ol>"

    def test_list_closed_by_other_kind(self) -> None:
        html = render(Token(TokenKind.BULLET_LIST, "a"), Token(TokenKind.TEXT, "after"))
        assert html == "<ul><li>a</li>\n</ul>after\n"

    def test_switching_list_kind(self) -> None:
        html = render(
            Token(TokenKind.NUMBERED_LIST, "one"),
            Token(TokenKind.BULLET_LIST, "dot"),
            Token(TokenKind.NUMBERED_LIST, "two"),
        )
        assert html == "<ol><li>one</li>\n</ol><ul><li>dot</li>\n</ul><ol><li>two</li>\n</ol>"

    def test_separate_runs(self) -> None:
        html = render(
            Token(TokenKind.BULLET_LIST, "a"),
            Token(TokenKind.BOLD, "b"),
            Token(TokenKind.BULLET_LIST, "c"),
        )
        assert html.count("<ul>") == 2
        assert html.count("</ul>") == 2


class TestLineAdjacency:
    """List items must come from consecutive source lines."""

    def test_consecutive_lines_share_list(self) -> None:
        html = render(Token(TokenKind.BULLET_LIST, "a", 1), Token(TokenKind.BULLET_LIST, "b", 2))
        assert html == "<ul><li>a</li>\n<li>b</li>\n</ul>"

    def test_line_gap_starts_new_list(self) -> None:
        html = render(Token(TokenKind.BULLET_LIST, "a", 1), Token(TokenKind.BULLET_LIST, "b", 3))
        assert html == "<ul><li>a</li>\n</ul><ul><li>b</li>\n</ul>"

    def test_line_gap_in_numbered_list(self) -> None:
        html = render(
            Token(TokenKind.NUMBERED_LIST, "a", 4),
            Token(TokenKind.NUMBERED_LIST, "b", 5),
            Token(TokenKind.NUMBERED_LIST, "c", 7),
        )
        assert html == "<ol><li>a</li>\n<li>b</li>\n</ol><ol><li>c</li>\n</ol>"

    def test_tokens_without_line_numbers_are_adjacent(self) -> None:
        html = render(Token(TokenKind.BULLET_LIST, "a"), Token(TokenKind.BULLET_LIST, "b"))
        assert html.count("<ul>") == 1


class TestEndOfStream:
    """Lists still open after the last token."""

    def test_closed_by_default(self) -> None:
        assert render(Token(TokenKind.BULLET_LIST, "a")) == "<ul><li>a</li>\n</ul>"
        assert render(Token(TokenKind.NUMBERED_LIST, "a")) == "<ol><li>a</li>\n</ol>"

    def test_left_open_when_disabled(self) -> None:
        html = render(Token(TokenKind.BULLET_LIST, "a"), close_lists_at_end=False)
        assert html == "<ul><li>a</li>\n"

    def test_closing_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="marklet")
        render(Token(TokenKind.BULLET_LIST, "a"))
        assert any("end of stream" in r.getMessage() for r in caplog.records)


class TestUnknownKinds:
    """Tokens outside the dispatch table produce no output."""

    def test_unknown_kind_skipped(self) -> None:
        assert render(Token(None, "ignored")) == ""  # type: ignore[arg-type]

    def test_unknown_kind_still_closes_list(self) -> None:
        html = render(
            Token(TokenKind.BULLET_LIST, "a"),
            Token("mystery", "ignored"),  # type: ignore[arg-type]
            Token(TokenKind.BULLET_LIST, "b"),
        )
        assert html == "<ul><li>a</li>\n</ul><ul><li>b</li>\n</ul>"


class TestRendererReuse:
    """Per-render state does not leak between calls."""

    def test_list_state_reset_between_renders(self) -> None:
        renderer = HtmlRenderer(config=RenderConfig(close_lists_at_end=False))
        first = renderer.render([Token(TokenKind.BULLET_LIST, "a")])
        second = renderer.render([Token(TokenKind.BULLET_LIST, "b")])
        assert first == "<ul><li>a</li>\n"
        assert second == "<ul><li>b</li>\n"

    def test_accepts_generator(self) -> None:
        tokens = (Token(TokenKind.TEXT, str(i)) for i in range(3))
        assert HtmlRenderer().render(tokens) == "0\n1\n2\n"

"""Tests for block-level line classification."""

from __future__ import annotations

import pytest

from marklet import tokenize
from marklet.tokens import Token, TokenKind


def kinds_and_values(source: str) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.value) for t in tokenize(source)]


class TestHeadings:
    """Heading prefixes, longest marker first."""

    @pytest.mark.parametrize(
        ("source", "kind"),
        [
            ("# Title", TokenKind.HEADER1),
            ("## Title", TokenKind.HEADER2),
            ("### Title", TokenKind.HEADER3),
            ("#### Title", TokenKind.HEADER4),
            ("##### Title", TokenKind.HEADER5),
            ("###### Title", TokenKind.HEADER6),
        ],
    )
    def test_heading_levels(self, source: str, kind: TokenKind) -> None:
        assert kinds_and_values(source) == [(kind, "Title")]

    def test_levels_five_and_six_need_no_space(self) -> None:
        assert kinds_and_values("#####Five") == [(TokenKind.HEADER5, "Five")]
        assert kinds_and_values("######Six") == [(TokenKind.HEADER6, "Six")]

    def test_lower_levels_need_space(self) -> None:
        """Without the space, #..#### fall through to plain text."""
        assert kinds_and_values("#tag") == [(TokenKind.TEXT, "#tag")]
        assert kinds_and_values("####Four") == [(TokenKind.TEXT, "####Four")]

    def test_extra_spaces_stripped(self) -> None:
        assert kinds_and_values("#    spaced out") == [(TokenKind.HEADER1, "spaced out")]

    def test_heading_content_not_inline_scanned(self) -> None:
        assert kinds_and_values("# **bold** title") == [(TokenKind.HEADER1, "**bold** title")]

    def test_heading_level_property(self) -> None:
        assert TokenKind.HEADER4.heading_level == 4
        assert TokenKind.TEXT.heading_level == 0


class TestListItems:
    """Bulleted and numbered list item markers."""

    def test_bullet_item(self) -> None:
        assert kinds_and_values("- item") == [(TokenKind.BULLET_LIST, "item")]

    def test_numbered_item(self) -> None:
        assert kinds_and_values("1. first") == [(TokenKind.NUMBERED_LIST, "first")]

    def test_multi_digit_number(self) -> None:
        assert kinds_and_values("123. many") == [(TokenKind.NUMBERED_LIST, "many")]

    def test_one_token_per_item_line(self) -> None:
        tokens = tokenize("- a\n- b\n- c")
        assert [t.kind for t in tokens] == [TokenKind.BULLET_LIST] * 3
        assert [t.lineno for t in tokens] == [1, 2, 3]

    @pytest.mark.parametrize("source", ["-item", "1.item", "a. item", ". item", "1) item"])
    def test_not_a_list_item(self, source: str) -> None:
        assert kinds_and_values(source) == [(TokenKind.TEXT, source)]

    def test_is_list_property(self) -> None:
        assert TokenKind.BULLET_LIST.is_list
        assert TokenKind.NUMBERED_LIST.is_list
        assert not TokenKind.BLOCK_QUOTE.is_list


class TestBlockQuotes:
    """Single-line block quotes."""

    def test_block_quote(self) -> None:
        assert kinds_and_values("> quoted") == [(TokenKind.BLOCK_QUOTE, "quoted")]

    def test_marker_needs_space(self) -> None:
        assert kinds_and_values(">quoted") == [(TokenKind.TEXT, ">quoted")]


class TestLines:
    """Line splitting and token bookkeeping."""

    def test_empty_source(self) -> None:
        assert tokenize("") == ()
        assert tokenize(b"") == ()

    def test_blank_lines_produce_no_tokens(self) -> None:
        assert kinds_and_values("a\n\n\nb") == [(TokenKind.TEXT, "a"), (TokenKind.TEXT, "b")]

    def test_trailing_newline(self) -> None:
        assert kinds_and_values("a\n") == [(TokenKind.TEXT, "a")]

    def test_line_numbers(self) -> None:
        tokens = tokenize("# A\n\ntext")
        assert [t.lineno for t in tokens] == [1, 3]

    def test_tokens_compare_by_kind_and_value(self) -> None:
        assert Token(TokenKind.TEXT, "x", 1) == Token(TokenKind.TEXT, "x", 9)

    def test_token_repr_is_compact(self) -> None:
        token = Token(TokenKind.TEXT, "a" * 40, 2)
        assert repr(token) == f"Token(TEXT, {'a' * 17 + '...'!r}, 2)"

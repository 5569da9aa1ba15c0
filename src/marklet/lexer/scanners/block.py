"""Block mode scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from marklet.lexer.modes import INDENT_PREFIX, LexerMode
from marklet.tokens import Token


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Classifies one line outside any code block:
    1. Indented code check (runs first, so an indented fence is code)
    2. Fence check
    3. Block prefixes: heading, list item, block quote
    4. Inline span scan for everything else

    """

    _code_lines: list[str]

    def _is_fence(self, line: str) -> bool:
        raise NotImplementedError

    def _is_indented_code(self, line: str) -> bool:
        raise NotImplementedError

    def _try_classify_heading(self, line: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_list_item(self, line: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_block_quote(self, line: str) -> Token | None:
        raise NotImplementedError

    def _scan_block(self, line: str) -> Iterator[Token]:
        """Classify a line in BLOCK mode and yield its tokens."""
        if self._is_indented_code(line):
            self._enter_code_mode(LexerMode.CODE_INDENT)  # type: ignore[attr-defined]
            self._code_lines.append(line[len(INDENT_PREFIX) :])
            return

        if self._is_fence(line):
            self._enter_code_mode(LexerMode.CODE_FENCE)  # type: ignore[attr-defined]
            return

        token = (
            self._try_classify_heading(line)
            or self._try_classify_list_item(line)
            or self._try_classify_block_quote(line)
        )
        if token is not None:
            yield token
            return

        yield from self._scan_inline(line)  # type: ignore[attr-defined]

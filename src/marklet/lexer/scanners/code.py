"""Code block mode scanner mixin.

Handles both code modes. Lines are buffered while a mode is active and
emitted as a single CODE_BLOCK token when the mode ends.
"""

from __future__ import annotations

from collections.abc import Iterator

from marklet.lexer.modes import INDENT_PREFIX, LexerMode
from marklet.tokens import Token, TokenKind
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


class CodeScannerMixin:
    """Mixin providing fenced and indented code scanning logic."""

    # These will be set by the Lexer class
    _mode: LexerMode
    _lineno: int
    _code_lines: list[str]
    _code_lineno: int

    def _make_token(self, kind: TokenKind, value: str, lineno: int | None = None) -> Token:
        raise NotImplementedError

    def _is_fence(self, line: str) -> bool:
        raise NotImplementedError

    def _is_indented_code(self, line: str) -> bool:
        raise NotImplementedError

    def _enter_code_mode(self, mode: LexerMode) -> None:
        """Switch into a code mode, starting an empty buffer."""
        logger.debug("entering %s at line %d", mode.name, self._lineno)
        self._mode = mode
        self._code_lines = []
        self._code_lineno = self._lineno

    def _emit_code_block(self) -> Token:
        """Build the CODE_BLOCK token from the buffer and return to BLOCK mode.

        Each buffered line is followed by a newline in the value.
        """
        value = "".join(line + "\n" for line in self._code_lines)
        logger.debug(
            "leaving %s: %d line(s) from line %d",
            self._mode.name,
            len(self._code_lines),
            self._code_lineno,
        )
        token = self._make_token(TokenKind.CODE_BLOCK, value, self._code_lineno)
        self._mode = LexerMode.BLOCK
        self._code_lines = []
        self._code_lineno = 0
        return token

    def _scan_code_fence_content(self, line: str) -> Iterator[Token]:
        """Scan a line inside a fenced code block.

        Yields:
            The CODE_BLOCK token when the closing fence is found.
        """
        if self._is_fence(line):
            yield self._emit_code_block()
            return

        # Content is kept verbatim, indentation included
        self._code_lines.append(line)

    def _scan_code_indent_content(self, line: str) -> Iterator[Token]:
        """Scan a line inside an indented code block.

        A line without the indent prefix ends the block and is then
        classified normally.
        """
        if self._is_indented_code(line):
            self._code_lines.append(line[len(INDENT_PREFIX) :])
            return

        yield self._emit_code_block()
        yield from self._scan_block(line)  # type: ignore[attr-defined]

"""Line-oriented state-machine lexer.

Scans the source one line at a time: find the line window, dispatch on
the current mode, then commit past the newline. Every line is visited
exactly once.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from marklet.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
)
from marklet.lexer.modes import LexerMode
from marklet.lexer.scanners import (
    BlockScannerMixin,
    CodeScannerMixin,
    InlineScannerMixin,
)
from marklet.tokens import Token, TokenKind
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


def _decode(source: bytes | bytearray | memoryview | str) -> str:
    """Decode source to text. Invalid UTF-8 becomes replacement characters."""
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source).decode("utf-8", errors="replace")
    raise TypeError(f"source must be bytes or str, not {type(source).__name__}")


class Lexer(
    # Classifiers (pure logic, no state mutation)
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    FenceClassifierMixin,
    # Scanners (mode-specific scanning logic)
    BlockScannerMixin,
    CodeScannerMixin,
    InlineScannerMixin,
):
    """Line-oriented state-machine lexer.

    Usage:
            >>> lexer = Lexer(b"# Hello\\n**World**")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(HEADER1, 'Hello', 1)
        Token(BOLD, 'World', 2)

    Thread Safety:
        Lexer instances are single-use. Create one per source.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_mode",
        # Code block state
        "_code_lines",  # Buffered lines of the open code block
        "_code_lineno",  # Line that opened the code block
    )

    def __init__(self, source: bytes | bytearray | memoryview | str) -> None:
        """Initialize lexer with source.

        Args:
            source: Markdown document as UTF-8 bytes or text

        Raises:
            TypeError: If source is neither bytes-like nor str.
        """
        self._source = _decode(source)
        self._source_len = len(self._source)
        self._pos = 0
        self._lineno = 0
        self._mode = LexerMode.BLOCK

        self._code_lines: list[str] = []
        self._code_lineno: int = 0

    @property
    def mode(self) -> LexerMode:
        """Current lexer mode."""
        return self._mode

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        A code block still open at end of input is emitted rather than
        dropped.

        Yields:
            Token objects in document order
        """
        while self._pos < self._source_len:
            line_end = self._find_line_end()
            line = self._source[self._pos : line_end]
            self._lineno += 1
            self._commit_to(line_end)
            yield from self._dispatch_mode(line)

        if self._mode is not LexerMode.BLOCK:
            logger.debug("%s still open at end of input", self._mode.name)
            yield self._emit_code_block()

    def _dispatch_mode(self, line: str) -> Iterator[Token]:
        """Dispatch a line to the scanner for the current mode."""
        if self._mode is LexerMode.BLOCK:
            yield from self._scan_block(line)
        elif self._mode is LexerMode.CODE_FENCE:
            yield from self._scan_code_fence_content(line)
        elif self._mode is LexerMode.CODE_INDENT:
            yield from self._scan_code_indent_content(line)

    # =========================================================================
    # Window navigation helpers
    # =========================================================================

    def _find_line_end(self) -> int:
        """Find the end of the current line (position of \\n or EOF)."""
        idx = self._source.find("\n", self._pos)
        return idx if idx != -1 else self._source_len

    def _commit_to(self, line_end: int) -> None:
        """Commit position past line_end, consuming the newline if present."""
        self._pos = line_end + 1 if line_end < self._source_len else line_end

    def _make_token(self, kind: TokenKind, value: str, lineno: int | None = None) -> Token:
        """Create a Token at the current line (or at lineno if given)."""
        return Token(kind, value, self._lineno if lineno is None else lineno)

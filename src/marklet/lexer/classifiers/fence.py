"""Code block boundary classifier mixin."""

from marklet.lexer.modes import FENCE_MARKER, INDENT_PREFIX


class FenceClassifierMixin:
    """Mixin providing fenced and indented code line detection.

    Pure checks; the code scanner owns the mode transitions.
    """

    def _is_fence(self, line: str) -> bool:
        """Check if line opens or closes a fenced code block."""
        return line.startswith(FENCE_MARKER)

    def _is_indented_code(self, line: str) -> bool:
        """Check if line belongs to an indented code block."""
        return line.startswith(INDENT_PREFIX)

"""Mode-specific scanners for the marklet lexer."""

from marklet.lexer.scanners.block import BlockScannerMixin
from marklet.lexer.scanners.code import CodeScannerMixin
from marklet.lexer.scanners.inline import InlineScannerMixin

__all__ = [
    "BlockScannerMixin",
    "CodeScannerMixin",
    "InlineScannerMixin",
]

"""Line classifiers for the marklet lexer.

Each classifier is a mixin that provides classification logic for
a specific block type. Classifiers are pure: they inspect a line and
return a token (or a verdict) without changing lexer state.
"""

from marklet.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from marklet.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from marklet.lexer.classifiers.list import (
    ListClassifierMixin,
)
from marklet.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
]

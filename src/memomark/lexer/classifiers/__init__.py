"""Line classifiers for the memomark lexer.

Each classifier is a mixin that recognizes one kind of line. Classifiers
are pure: they look at one line and either return a token or None.
"""

from memomark.lexer.classifiers.fence import FenceClassifierMixin
from memomark.lexer.classifiers.heading import HeadingClassifierMixin
from memomark.lexer.classifiers.list import ListClassifierMixin
from memomark.lexer.classifiers.quote import QuoteClassifierMixin
from memomark.lexer.classifiers.table import TableClassifierMixin
from memomark.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "TableClassifierMixin",
    "ThematicClassifierMixin",
]

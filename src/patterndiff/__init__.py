"""
patterndiff - side-by-side Next.js 15/16 pattern comparisons.

Compiled-in catalog of before/after code examples, a syntax-highlight
adapter with a plain-text fallback, and a static-site builder.

Example:
    >>> from patterndiff import get_store, highlight_code
    >>> store = get_store()
    >>> example = store.get_example_by_id("caching-semantics-v15")
    >>> html = highlight_code(example.code_snippet_after)
"""

__version__ = "0.1.0"

from patterndiff.catalog import (
    Category,
    CrossVersionLink,
    ExampleStore,
    HighlightedExample,
    NavigationRoute,
    PatternExample,
    get_store,
)
from patterndiff.core.errors import InvalidVersionError, PatternDiffError
from patterndiff.highlight import HighlightAdapter, highlight_code, highlight_code_async

__all__ = [
    "__version__",
    "Category",
    "CrossVersionLink",
    "ExampleStore",
    "HighlightedExample",
    "NavigationRoute",
    "PatternExample",
    "get_store",
    "InvalidVersionError",
    "PatternDiffError",
    "HighlightAdapter",
    "highlight_code",
    "highlight_code_async",
]

"""
Build-time syntax highlighting with an escaped plain-text fallback.
"""

from patterndiff.highlight.adapter import (
    DEFAULT_LANGUAGE,
    DEFAULT_THEME,
    HighlightAdapter,
    escape_html,
    fallback_fragment,
    get_adapter,
    highlight_code,
    highlight_code_async,
    reset_adapter,
)
from patterndiff.highlight.batch import highlight_examples

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_THEME",
    "HighlightAdapter",
    "escape_html",
    "fallback_fragment",
    "get_adapter",
    "highlight_code",
    "highlight_code_async",
    "highlight_examples",
    "reset_adapter",
]

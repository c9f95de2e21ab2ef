"""
Highlight adapter: raw source string -> embeddable markup fragment.

Pygments is the external engine. The adapter fixes the theme and the
inline-styles output mode at the call site and guarantees that callers
always get markup back:

    engine success ──► highlighted fragment
    engine failure ──► escaped <pre><code class="language-…"> fragment

There are no retries: highlighting is cosmetic, so the first failure takes
the fallback path.

Example:
    >>> adapter = HighlightAdapter()
    >>> adapter.highlight("if (a < b) {}", "not-a-real-language")
    '<pre><code class="language-not-a-real-language">if (a &lt; b) {}</code></pre>'
"""

from __future__ import annotations

import asyncio

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name

from patterndiff.core.errors import HighlightError
from patterndiff.core.logging import get_logger
from patterndiff.core.result import Result, try_result_with

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "typescript"
DEFAULT_THEME = "github-dark"

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters."""
    return text.translate(_HTML_ESCAPES)


def fallback_fragment(code: str, language: str) -> str:
    """Plain code container used when the engine cannot highlight ``code``."""
    return f'<pre><code class="language-{escape_html(language)}">{escape_html(code)}</code></pre>'


class HighlightAdapter:
    """Converts code snippets to markup with graceful degradation.

    Manifesto:
        A snippet the engine cannot handle still has to appear on the page.
        The engine call produces a ``Result``; an ``Err`` is folded into
        escaped plain-text markup inside the adapter and never surfaces to
        the caller.

    Features:
        - Fixed theme, inline styles (no stylesheet needed to embed)
        - Sync ``highlight`` and thread-offloaded ``highlight_async``
        - Optional timeout on the async path, same fallback on expiry

    Tags:
        - highlight
        - pygments
        - fallback
    """

    def __init__(
        self,
        theme: str = DEFAULT_THEME,
        default_language: str = DEFAULT_LANGUAGE,
        timeout: float | None = None,
    ):
        self.theme = theme
        self.default_language = default_language
        self.timeout = timeout

    def _render(self, code: str, language: str) -> Result[str]:
        def run() -> str:
            lexer = get_lexer_by_name(language)
            formatter = HtmlFormatter(style=self.theme, noclasses=True, wrapcode=True)
            return pygments_highlight(code, lexer, formatter)

        return try_result_with(
            run,
            lambda exc: HighlightError(
                f"Highlighting failed for language {language!r}: {exc}", cause=exc
            ).with_context(language=language),
        )

    def _fallback(self, code: str, language: str, error: Exception) -> str:
        logger.warning(
            "highlight_fallback",
            language=language,
            theme=self.theme,
            error=str(error),
            error_type=type(error.__cause__ or error).__name__,
        )
        return fallback_fragment(code, language)

    def highlight(self, code: str, language: str | None = None) -> str:
        """Highlight ``code``; never raises."""
        lang = language or self.default_language
        return self._render(code, lang).unwrap_or_else(
            lambda error: self._fallback(code, lang, error)
        )

    async def highlight_async(self, code: str, language: str | None = None) -> str:
        """Highlight ``code`` in a worker thread; never raises.

        When ``timeout`` is set and expires, the fallback fragment is returned.
        """
        lang = language or self.default_language
        try:
            result = await asyncio.wait_for(
                asyncio.to_thread(self._render, code, lang),
                timeout=self.timeout,
            )
        except TimeoutError as exc:
            error = HighlightError(
                f"Highlighting timed out after {self.timeout}s", cause=exc
            ).with_context(language=lang)
            return self._fallback(code, lang, error)
        return result.unwrap_or_else(lambda error: self._fallback(code, lang, error))


_default_adapter: HighlightAdapter | None = None


def get_adapter() -> HighlightAdapter:
    """Process-wide adapter configured from settings."""
    global _default_adapter
    if _default_adapter is None:
        from patterndiff.core.settings import get_settings

        settings = get_settings()
        _default_adapter = HighlightAdapter(
            theme=settings.highlight_theme,
            default_language=settings.default_language,
            timeout=settings.highlight_timeout,
        )
    return _default_adapter


def reset_adapter() -> None:
    global _default_adapter
    _default_adapter = None


def highlight_code(code: str, language: str | None = None) -> str:
    return get_adapter().highlight(code, language)


async def highlight_code_async(code: str, language: str | None = None) -> str:
    return await get_adapter().highlight_async(code, language)


__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_THEME",
    "HighlightAdapter",
    "escape_html",
    "fallback_fragment",
    "get_adapter",
    "reset_adapter",
    "highlight_code",
    "highlight_code_async",
]

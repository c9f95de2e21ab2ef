"""
Concurrent highlighting of every snippet on a page.

Each snippet is an independent call, so all of them are started together
and joined with ``asyncio.gather``. Results are attached back to their
example by id rather than by completion order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from patterndiff.catalog.models import HighlightedExample, PatternExample
from patterndiff.core.logging import get_logger
from patterndiff.highlight.adapter import HighlightAdapter, get_adapter

logger = get_logger(__name__)


async def _highlight_snippet(
    adapter: HighlightAdapter,
    key: tuple[str, str],
    code: str,
    language: str | None,
) -> tuple[tuple[str, str], str]:
    return key, await adapter.highlight_async(code, language)


async def highlight_examples(
    examples: Sequence[PatternExample],
    language: str | None = None,
    adapter: HighlightAdapter | None = None,
) -> list[HighlightedExample]:
    """Highlight the before/after snippets of ``examples`` concurrently.

    Args:
        examples: Examples to annotate (order is preserved in the output).
        language: Language tag for every snippet; the adapter default if None.
        adapter: Adapter to use; the settings-configured default if None.

    Returns:
        One :class:`HighlightedExample` per input example.
    """
    adapter = adapter or get_adapter()

    tasks = []
    for example in examples:
        if example.code_snippet_before is not None:
            tasks.append(
                _highlight_snippet(adapter, (example.id, "before"), example.code_snippet_before, language)
            )
        tasks.append(
            _highlight_snippet(adapter, (example.id, "after"), example.code_snippet_after, language)
        )

    fragments = dict(await asyncio.gather(*tasks))
    logger.debug("examples_highlighted", examples=len(examples), snippets=len(fragments))

    return [
        HighlightedExample(
            example=example,
            html_before=fragments.get((example.id, "before")),
            html_after=fragments[(example.id, "after")],
        )
        for example in examples
    ]


__all__ = ["highlight_examples"]

"""
Static site builder.

Coordinates a site build: query the store, highlight every snippet of a
category page, run the renderers, and write the HTML files.

Example:
    >>> builder = SiteBuilder()
    >>> builder.build([15])
    {'15/index.html': 5321, '15/examples/data-fetching-caching/index.html': 48210, ...}
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from pathlib import Path

from patterndiff.catalog.models import SUPPORTED_VERSIONS, NavigationRoute, require_version
from patterndiff.catalog.store import ExampleStore, get_store
from patterndiff.core.logging import LogContext, get_logger
from patterndiff.core.settings import PatternDiffSettings, get_settings
from patterndiff.highlight.adapter import HighlightAdapter, get_adapter
from patterndiff.highlight.batch import highlight_examples
from patterndiff.site.renderers import (
    BaseRenderer,
    CategoryPageRenderer,
    HomePageRenderer,
    NotFoundRenderer,
)
from patterndiff.site.routes import build_routes, output_file

logger = get_logger(__name__)


class SiteBuilder:
    """Build the static site for one or more versions.

    Manifesto:
        One command writes the whole site. Pages of a version are
        independent, so category pages are highlighted and rendered
        concurrently and joined before anything is written. A category
        with no examples in a version gets no page; readers who follow a
        stale link land on the version's 404 page.

    Architecture:
        ```
        SiteBuilder.build(versions)
              │
              ├──► for each version:
              │         ├──► HomePageRenderer.render()
              │         ├──► build_routes() ──► gather(_render_category(route) ...)
              │         │                            │
              │         │                            ├──► highlight_examples()
              │         │                            └──► CategoryPageRenderer.render()
              │         └──► NotFoundRenderer.render()
              │
              └──► write output_dir/{relative_path}
        ```

    Guardrails:
        - Do NOT write partial versions
          ✅ Render every page of a version before writing any of them
        - Do NOT swallow render errors
          ✅ RenderError propagates to the caller

    Tags:
        - builder
        - generation
        - asyncio
    """

    def __init__(
        self,
        store: ExampleStore | None = None,
        settings: PatternDiffSettings | None = None,
        adapter: HighlightAdapter | None = None,
        output_dir: Path | None = None,
        template_dir: Path | None = None,
    ):
        self.store = store or get_store()
        self.settings = settings or get_settings()
        self.adapter = adapter or (
            HighlightAdapter(
                theme=self.settings.highlight_theme,
                default_language=self.settings.default_language,
                timeout=self.settings.highlight_timeout,
            )
            if settings is not None
            else get_adapter()
        )
        self.output_dir = Path(output_dir) if output_dir else Path(self.settings.output_dir)
        self.template_dir = template_dir

    def _renderer_kwargs(self) -> dict:
        return {"template_dir": self.template_dir, "site_title": self.settings.site_title}

    async def _render_category(self, route: NavigationRoute) -> tuple[str, str]:
        examples = [self.store.get_example_by_id(example_id) for example_id in route.example_ids]
        highlighted = await highlight_examples(
            [ex for ex in examples if ex is not None],
            language=self.settings.default_language,
            adapter=self.adapter,
        )
        renderer = CategoryPageRenderer(
            self.store,
            route.version,
            route.category_id,
            highlighted,
            **self._renderer_kwargs(),
        )
        return str(output_file(renderer.path)), renderer.render()

    def _render_static(self, renderer: BaseRenderer) -> tuple[str, str]:
        return str(output_file(renderer.path)), renderer.render()

    async def render_version(self, version: int) -> dict[str, str]:
        """Render every page of ``version`` without writing anything.

        Returns:
            Dict mapping relative output path to HTML
        """
        require_version(version)
        routes = build_routes(self.store, version)

        with LogContext(version=version):
            pages = dict(
                await asyncio.gather(*(self._render_category(route) for route in routes))
            )
            pages.update([
                self._render_static(HomePageRenderer(self.store, version, **self._renderer_kwargs())),
                self._render_static(NotFoundRenderer(self.store, version, **self._renderer_kwargs())),
            ])
            logger.info("version_rendered", pages=len(pages), categories=len(routes))
        return pages

    def _write(self, pages: dict[str, str]) -> dict[str, int]:
        written: dict[str, int] = {}
        for relative, html in sorted(pages.items()):
            target = self.output_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            data = html.encode("utf-8")
            target.write_bytes(data)
            written[relative] = len(data)
            logger.debug("page_written", path=str(target), bytes=len(data))
        return written

    async def build_async(self, versions: Iterable[int] | None = None) -> dict[str, int]:
        """Render and write the site for ``versions`` (all supported if None).

        Returns:
            Dict mapping relative output path to bytes written
        """
        selected = tuple(versions) if versions else SUPPORTED_VERSIONS
        for version in selected:
            require_version(version)

        written: dict[str, int] = {}
        for version in selected:
            pages = await self.render_version(version)
            written.update(self._write(pages))

        logger.info(
            "site_built",
            output_dir=str(self.output_dir),
            versions=list(selected),
            pages=len(written),
            bytes=sum(written.values()),
        )
        return written

    def build(self, versions: Iterable[int] | None = None) -> dict[str, int]:
        """Synchronous wrapper around :meth:`build_async`."""
        return asyncio.run(self.build_async(versions))


__all__ = ["SiteBuilder"]

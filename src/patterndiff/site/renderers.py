"""
Page renderers for the static site.

Each renderer produces one HTML page for one version. Templates handle
layout; renderers query the store and assemble the template context.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from patterndiff.catalog.models import HighlightedExample, other_version, require_version
from patterndiff.catalog.store import ExampleStore
from patterndiff.core.errors import RenderError
from patterndiff.core.settings import get_settings
from patterndiff.site.routes import (
    build_routes,
    category_path,
    home_path,
    not_found_path,
    switch_version_path,
)

TEMPLATE_DIR = Path(__file__).parent / "templates"


class BaseRenderer(ABC):
    """Base class for page renderers.

    Manifesto:
        Renderers turn store queries into pages. Each renderer knows how
        to assemble the context for one kind of page; the templates only
        format it. Anything that goes wrong inside a template surfaces as a
        ``RenderError`` naming the template and version.

    Architecture:
        ```
        ExampleStore ──► Renderer._get_context()
                               │
                               ▼
                        Jinja2 Template (base.html.j2 + page)
                               │
                               ▼
                          HTML string
        ```

    Features:
        - Templates loaded from the packaged directory or an override
        - Autoescaping for HTML; highlighted fragments are marked safe
        - Shared metadata (generation time, year, site title, navigation)

    Tags:
        - renderer
        - template
        - jinja2
    """

    template_name: str = ""

    def __init__(
        self,
        store: ExampleStore,
        version: int,
        template_dir: Path | None = None,
        site_title: str | None = None,
    ):
        """Initialize the renderer.

        Args:
            store: Catalog to query
            version: Version the page belongs to
            template_dir: Directory containing templates (packaged ones if None)
            site_title: Title prefix (settings value if None)

        Raises:
            InvalidVersionError: if ``version`` is not supported
        """
        self.store = store
        self.version = require_version(version)
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self.site_title = site_title or get_settings().site_title

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals["home_path"] = home_path
        self.env.globals["category_path"] = category_path

    @property
    def path(self) -> str:
        """Site path of the rendered page."""
        return home_path(self.version)

    @abstractmethod
    def _get_context(self) -> dict[str, Any]:
        """Page-specific template variables."""

    def _get_metadata(self) -> dict[str, Any]:
        now = datetime.now()
        return {
            "generated_at": now,
            "year": now.year,
            "site_title": self.site_title,
            "version": self.version,
            "other_version": other_version(self.version),
            "switch_path": switch_version_path(self.path, other_version(self.version), self.store),
            "nav_routes": build_routes(self.store, self.version),
            "categories_by_id": {c.id: c for c in self.store.list_categories()},
            "active_category": None,
        }

    def render(self) -> str:
        """Render the page.

        Raises:
            RenderError: if the template cannot be loaded or rendered
        """
        context = self._get_metadata()
        context.update(self._get_context())
        try:
            return self.env.get_template(self.template_name).render(**context)
        except TemplateError as exc:
            raise RenderError(
                f"Failed to render {self.template_name}: {exc}", cause=exc
            ).with_context(template=self.template_name, version=self.version) from exc


class HomePageRenderer(BaseRenderer):
    """Version landing page: one card per populated category."""

    template_name = "index.html.j2"

    def _get_context(self) -> dict[str, Any]:
        counts = self.store.count_examples_by_category(self.version)
        cards = [
            {
                "category": category,
                "count": counts[category.id],
                "path": category_path(self.version, category.id),
            }
            for category in self.store.list_categories()
            if counts.get(category.id)
        ]
        return {
            "cards": cards,
            "example_count": len(self.store.list_examples_by_version(self.version)),
        }


class CategoryPageRenderer(BaseRenderer):
    """All examples of one category in one version, with highlighted snippets.

    The caller highlights the examples (see
    :func:`patterndiff.highlight.highlight_examples`) and passes them in, so
    rendering itself stays synchronous.
    """

    template_name = "category.html.j2"

    def __init__(
        self,
        store: ExampleStore,
        version: int,
        category_id: str,
        examples: Sequence[HighlightedExample],
        template_dir: Path | None = None,
        site_title: str | None = None,
    ):
        super().__init__(store, version, template_dir=template_dir, site_title=site_title)
        self.category_id = category_id
        self.examples = list(examples)

    @property
    def path(self) -> str:
        return category_path(self.version, self.category_id)

    def _get_context(self) -> dict[str, Any]:
        category = self.store.get_category_by_id(self.category_id)
        if category is None:
            raise RenderError(
                f"Unknown category: {self.category_id}"
            ).with_context(category_id=self.category_id, version=self.version)
        if not self.examples:
            raise RenderError(
                f"Category {self.category_id} has no examples in version {self.version}"
            ).with_context(category_id=self.category_id, version=self.version)

        return {
            "category": category,
            "active_category": category.id,
            "cards": [
                {"item": item, "link": self.store.resolve_cross_version_link(item.example)}
                for item in self.examples
            ],
        }


class NotFoundRenderer(BaseRenderer):
    """Not-found page of a version."""

    template_name = "404.html.j2"

    @property
    def path(self) -> str:
        return not_found_path(self.version)

    def _get_context(self) -> dict[str, Any]:
        return {}


__all__ = [
    "TEMPLATE_DIR",
    "BaseRenderer",
    "HomePageRenderer",
    "CategoryPageRenderer",
    "NotFoundRenderer",
]

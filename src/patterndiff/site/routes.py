"""
URL layout of the generated site.

    /{version}/                          home page of a version
    /{version}/examples/{category}/      category page
    /{version}/404.html                  not-found page

Every path ends in ``/`` and maps to ``index.html`` below it on disk.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from patterndiff.catalog.models import NavigationRoute, require_version
from patterndiff.catalog.store import ExampleStore

_CATEGORY_IN_PATH = re.compile(r"/examples/([^/]+)")


def home_path(version: int) -> str:
    return f"/{require_version(version)}/"


def category_path(version: int, category_id: str) -> str:
    return f"/{require_version(version)}/examples/{category_id}/"


def not_found_path(version: int) -> str:
    return f"/{require_version(version)}/404.html"


def switch_version_path(
    pathname: str,
    target_version: int,
    store: ExampleStore | None = None,
) -> str:
    """Where the version switcher should send a reader currently at ``pathname``.

    Keeps the current category when the path names one, otherwise goes to
    the target version's home page. With a ``store``, a category that has
    no examples in the target version also falls back to the home page.
    """
    match = _CATEGORY_IN_PATH.search(pathname)
    if match is None:
        return home_path(target_version)

    category_id = match.group(1)
    if store is not None and not store.list_examples_by_category_and_version(category_id, target_version):
        return home_path(target_version)
    return category_path(target_version, category_id)


def output_file(path: str) -> PurePosixPath:
    """Relative file a route path is written to (``/15/`` -> ``15/index.html``)."""
    relative = path.lstrip("/")
    if not relative or relative.endswith("/"):
        return PurePosixPath(relative) / "index.html"
    return PurePosixPath(relative)


def build_routes(store: ExampleStore, version: int) -> list[NavigationRoute]:
    """One route per category with at least one example in ``version``, in display order."""
    routes = []
    for category in store.list_categories():
        examples = store.list_examples_by_category_and_version(category.id, version)
        if not examples:
            continue
        routes.append(
            NavigationRoute(
                path=category_path(version, category.id),
                version=version,
                category_id=category.id,
                example_ids=tuple(ex.id for ex in examples),
            )
        )
    return routes


__all__ = [
    "home_path",
    "category_path",
    "not_found_path",
    "switch_version_path",
    "output_file",
    "build_routes",
]

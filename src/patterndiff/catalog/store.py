"""
Query interface for the pattern catalog.

Provides read-only access to the category and example tables: filter by
version, by category, by both, look up by id, and resolve cross-version
links.

Example:
    >>> from patterndiff.catalog.store import get_store
    >>> store = get_store()
    >>> [c.id for c in store.list_categories()][:2]
    ['data-fetching-caching', 'routing-navigation']
    >>> store.get_example_by_id("nope") is None
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from patterndiff.catalog.models import (
    SUPPORTED_VERSIONS,
    Category,
    CrossVersionLink,
    PatternExample,
    is_supported_version,
    require_version,
)
from patterndiff.core.errors import CatalogIntegrityError
from patterndiff.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogReport:
    """Outcome of :meth:`ExampleStore.validate`.

    Attributes:
        valid: ``True`` when there are no issues (warnings are allowed).
        issues: Problems that break an invariant of the catalog.
        warnings: Degraded-but-renderable content (dangling links, empty categories).
        stats: Same payload as :meth:`ExampleStore.stats`.
    """

    valid: bool
    issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict[str, Any] = field(default_factory=dict)


class ExampleStore:
    """Read-only store over the category and example tables.

    Manifesto:
        The catalog is content, and content must never crash a rendering
        pass. The store indexes the tables once, rejects tables that are
        structurally broken, and answers every query with plain records or
        ``None``. Only a malformed version selector raises.

    Architecture:
        ```
        CATEGORIES, EXAMPLES (tuples)
              │
              ▼
        ExampleStore._build_indexes()
              │
              ├──► list_categories()                 sorted by order (stable)
              ├──► list_examples_by_version(v)       table order
              ├──► list_examples_by_category(id)     table order
              ├──► get_example_by_id(id)             example | None
              └──► resolve_cross_version_link(ex)    link | None
        ```

    Guardrails:
        - Returned lists are fresh; records are frozen.
        - Dangling or same-version ``related_example_id`` values are logged
          at build time and degrade to "unavailable" at query time.

    Tags:
        - catalog
        - query
        - core_infrastructure
    """

    def __init__(
        self,
        categories: Iterable[Category],
        examples: Iterable[PatternExample],
    ):
        self._categories: tuple[Category, ...] = tuple(categories)
        self._examples: tuple[PatternExample, ...] = tuple(examples)

        self._category_by_id: dict[str, Category] = {}
        self._example_by_id: dict[str, PatternExample] = {}
        self._sorted_categories: tuple[Category, ...] = ()

        self._build_indexes()
        self._check_links()

    def _build_indexes(self) -> None:
        """Index both tables by id and reject structurally broken content."""
        for category in self._categories:
            if category.id in self._category_by_id:
                raise CatalogIntegrityError(
                    f"Duplicate category id: {category.id}"
                ).with_context(category_id=category.id)
            self._category_by_id[category.id] = category

        for example in self._examples:
            if example.id in self._example_by_id:
                raise CatalogIntegrityError(
                    f"Duplicate example id: {example.id}"
                ).with_context(example_id=example.id)
            if example.category not in self._category_by_id:
                raise CatalogIntegrityError(
                    f"Example {example.id} references unknown category {example.category}"
                ).with_context(example_id=example.id, category_id=example.category)
            if not is_supported_version(example.version):
                raise CatalogIntegrityError(
                    f"Example {example.id} has unsupported version {example.version!r}"
                ).with_context(example_id=example.id, version=example.version)
            self._example_by_id[example.id] = example

        # sorted() is stable: equal orders keep definition order
        self._sorted_categories = tuple(sorted(self._categories, key=lambda c: c.order))

    def _check_links(self) -> None:
        for example in self._examples:
            if not example.available_in_other_version or example.related_example_id is None:
                continue
            target = self._example_by_id.get(example.related_example_id)
            if target is None:
                logger.warning(
                    "cross_version_link_dangling",
                    example_id=example.id,
                    related_example_id=example.related_example_id,
                )
            elif target.version == example.version:
                logger.warning(
                    "cross_version_link_same_version",
                    example_id=example.id,
                    related_example_id=example.related_example_id,
                    version=example.version,
                )

    # =========================================================================
    # Queries
    # =========================================================================

    def list_categories(self) -> list[Category]:
        """All categories, ascending by ``order``; ties keep definition order."""
        return list(self._sorted_categories)

    def list_categories_for_version(self, version: int) -> list[Category]:
        """Sorted categories that appear under ``version``."""
        require_version(version)
        return [c for c in self._sorted_categories if c.supports(version)]

    def list_examples_by_version(self, version: int) -> list[PatternExample]:
        """All examples for ``version`` in table order.

        Raises:
            InvalidVersionError: if ``version`` is not a supported version tag.
        """
        require_version(version)
        return [ex for ex in self._examples if ex.version == version]

    def list_examples_by_category(self, category_id: str) -> list[PatternExample]:
        """All examples in ``category_id``; an unknown id yields an empty list."""
        return [ex for ex in self._examples if ex.category == category_id]

    def list_examples_by_category_and_version(
        self,
        category_id: str,
        version: int,
    ) -> list[PatternExample]:
        """Examples matching both filters, in table order.

        Raises:
            InvalidVersionError: if ``version`` is not a supported version tag.
        """
        require_version(version)
        return [
            ex for ex in self._examples
            if ex.category == category_id and ex.version == version
        ]

    def get_example_by_id(self, example_id: str) -> PatternExample | None:
        return self._example_by_id.get(example_id)

    def get_category_by_id(self, category_id: str) -> Category | None:
        return self._category_by_id.get(category_id)

    def resolve_cross_version_link(self, example: PatternExample) -> CrossVersionLink | None:
        """Navigation target for ``example`` in the other version, or ``None``.

        ``None`` ("unavailable") when the example is not flagged as available
        in the other version, has no related id, the related id does not
        resolve, or the target shares the example's version.
        """
        if not example.available_in_other_version or example.related_example_id is None:
            return None

        target = self._example_by_id.get(example.related_example_id)
        if target is None or target.version == example.version:
            return None

        return CrossVersionLink(
            example=target,
            other_version=target.version,
            category_id=target.category,
        )

    def count_examples_by_category(self, version: int) -> dict[str, int]:
        """``{category_id: count}`` for ``version``, in category display order."""
        require_version(version)
        counts = {c.id: 0 for c in self._sorted_categories}
        for ex in self._examples:
            if ex.version == version:
                counts[ex.category] += 1
        return counts

    # =========================================================================
    # Reporting
    # =========================================================================

    def stats(self) -> dict[str, Any]:
        """Counts used by the CLI and by :meth:`validate`."""
        return {
            "categories": len(self._categories),
            "examples": len(self._examples),
            "examples_by_version": {
                v: sum(1 for ex in self._examples if ex.version == v)
                for v in SUPPORTED_VERSIONS
            },
            "breaking_changes": sum(1 for ex in self._examples if ex.is_breaking_change),
            "cross_version_links": sum(
                1 for ex in self._examples if self.resolve_cross_version_link(ex) is not None
            ),
        }

    def validate(self) -> CatalogReport:
        """Check the cross-reference invariants that the constructor tolerates."""
        issues: list[str] = []
        warnings: list[str] = []

        for ex in self._examples:
            related_id = ex.related_example_id
            if ex.available_in_other_version and related_id is None:
                warnings.append(f"{ex.id}: available in other version but no related example id")
            if not ex.available_in_other_version and related_id is not None:
                warnings.append(
                    f"{ex.id}: related example {related_id} set but not marked available"
                )
            if related_id is None:
                continue
            target = self._example_by_id.get(related_id)
            if target is None:
                warnings.append(f"{ex.id}: related example {related_id} does not exist")
            elif target.version == ex.version:
                issues.append(
                    f"{ex.id}: related example {related_id} has the same version ({ex.version})"
                )

        populated = {ex.category for ex in self._examples}
        for category in self._sorted_categories:
            if category.id not in populated:
                warnings.append(f"category {category.id} has no examples")
            if category.versions is not None:
                for v in category.versions:
                    if not is_supported_version(v):
                        issues.append(f"category {category.id} declares unsupported version {v!r}")

        return CatalogReport(
            valid=len(issues) == 0,
            issues=issues,
            warnings=warnings,
            stats=self.stats(),
        )


_default_store: ExampleStore | None = None


def get_store() -> ExampleStore:
    """The process-wide store over the compiled-in catalog (built once)."""
    global _default_store
    if _default_store is None:
        from patterndiff.catalog.data import CATEGORIES, EXAMPLES

        _default_store = ExampleStore(CATEGORIES, EXAMPLES)
    return _default_store


# Module-level query functions over the default store


def list_categories() -> list[Category]:
    return get_store().list_categories()


def list_examples_by_version(version: int) -> list[PatternExample]:
    return get_store().list_examples_by_version(version)


def list_examples_by_category(category_id: str) -> list[PatternExample]:
    return get_store().list_examples_by_category(category_id)


def list_examples_by_category_and_version(category_id: str, version: int) -> list[PatternExample]:
    return get_store().list_examples_by_category_and_version(category_id, version)


def get_example_by_id(example_id: str) -> PatternExample | None:
    return get_store().get_example_by_id(example_id)


def get_category_by_id(category_id: str) -> Category | None:
    return get_store().get_category_by_id(category_id)


def resolve_cross_version_link(example: PatternExample) -> CrossVersionLink | None:
    return get_store().resolve_cross_version_link(example)


__all__ = [
    "CatalogReport",
    "ExampleStore",
    "get_store",
    "list_categories",
    "list_examples_by_version",
    "list_examples_by_category",
    "list_examples_by_category_and_version",
    "get_example_by_id",
    "get_category_by_id",
    "resolve_cross_version_link",
]

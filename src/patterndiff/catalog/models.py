"""
Domain models for the pattern catalog.

STDLIB ONLY - NO PYDANTIC.

Records are frozen dataclasses with tuple/frozenset collections so that a
record handed to a caller cannot be used to mutate the store behind it.
Optional fields are ``None`` when absent, never an empty-string sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from patterndiff.core.errors import InvalidVersionError

SUPPORTED_VERSIONS: tuple[int, ...] = (15, 16)


def is_supported_version(version: object) -> bool:
    """True for the two supported version tags (``bool`` is not a version)."""
    return isinstance(version, int) and not isinstance(version, bool) and version in SUPPORTED_VERSIONS


def require_version(version: object) -> int:
    """Return ``version`` unchanged or raise :class:`InvalidVersionError`."""
    if not is_supported_version(version):
        raise InvalidVersionError(version)
    return version  # type: ignore[return-value]


def other_version(version: int) -> int:
    """The counterpart of a supported version tag (15 -> 16, 16 -> 15)."""
    require_version(version)
    return SUPPORTED_VERSIONS[1] if version == SUPPORTED_VERSIONS[0] else SUPPORTED_VERSIONS[0]


def previous_version(version: int) -> int:
    """The release a "Before" snippet is written against."""
    return require_version(version) - 1


class MigrationImpact(str, Enum):
    """Effort needed to adopt a pattern change."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True, slots=True)
class Category:
    """
    A named grouping of pattern examples, ordered for display.

    Attributes:
        id: Unique kebab-case slug, never reused.
        name: Display name.
        description: One-line description.
        icon: Optional glyph shown next to the name.
        order: Display order (lower first).
        versions: Versions this category appears under; ``None`` means all.
    """

    id: str
    name: str
    description: str
    order: int
    icon: str | None = None
    versions: frozenset[int] | None = None

    def supports(self, version: int) -> bool:
        return self.versions is None or version in self.versions


@dataclass(frozen=True, slots=True)
class PatternExample:
    """
    A single before/after code-pattern comparison.

    ``related_example_id`` is only meaningful when
    ``available_in_other_version`` is set; it may dangle, and the store
    treats a dangling reference as "unavailable".
    """

    id: str
    title: str
    version: int
    category: str
    description: str
    why_it_matters: str
    before_after_summary: str
    is_breaking_change: bool
    migration_impact: MigrationImpact
    code_snippet_after: str
    key_changes: tuple[str, ...]
    blog_post_link: str
    available_in_other_version: bool = False
    code_snippet_before: str | None = None
    related_example_id: str | None = None

    @property
    def other_version(self) -> int:
        return other_version(self.version)

    @property
    def has_before(self) -> bool:
        return self.code_snippet_before is not None


@dataclass(frozen=True, slots=True)
class CrossVersionLink:
    """Navigation target for an example's counterpart in the other version."""

    example: PatternExample
    other_version: int
    category_id: str


@dataclass(frozen=True, slots=True)
class HighlightedExample:
    """A pattern example together with its pre-rendered snippet markup."""

    example: PatternExample
    html_after: str
    html_before: str | None = None

    @property
    def id(self) -> str:
        return self.example.id


@dataclass(frozen=True, slots=True)
class NavigationRoute:
    """
    A static page for one version and category.

    Example:
        NavigationRoute(
            path="/15/examples/data-fetching-caching/",
            version=15,
            example_ids=("async-request-apis-v15", "caching-semantics-v15"),
        )
    """

    path: str
    version: int
    category_id: str
    example_ids: tuple[str, ...]


__all__ = [
    "SUPPORTED_VERSIONS",
    "is_supported_version",
    "require_version",
    "other_version",
    "previous_version",
    "MigrationImpact",
    "Category",
    "PatternExample",
    "CrossVersionLink",
    "HighlightedExample",
    "NavigationRoute",
]

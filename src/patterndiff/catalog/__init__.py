"""
Pattern catalog: domain models, the compiled-in tables, and the query store.

Example:
    >>> from patterndiff.catalog import list_examples_by_category_and_version
    >>> [ex.id for ex in list_examples_by_category_and_version("data-fetching-caching", 15)]
    ['async-request-apis-v15', 'caching-semantics-v15']
"""

from patterndiff.catalog.models import (
    SUPPORTED_VERSIONS,
    Category,
    CrossVersionLink,
    HighlightedExample,
    MigrationImpact,
    NavigationRoute,
    PatternExample,
    other_version,
    previous_version,
)
from patterndiff.catalog.store import (
    CatalogReport,
    ExampleStore,
    get_category_by_id,
    get_example_by_id,
    get_store,
    list_categories,
    list_examples_by_category,
    list_examples_by_category_and_version,
    list_examples_by_version,
    resolve_cross_version_link,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "Category",
    "CrossVersionLink",
    "HighlightedExample",
    "MigrationImpact",
    "NavigationRoute",
    "PatternExample",
    "other_version",
    "previous_version",
    "CatalogReport",
    "ExampleStore",
    "get_category_by_id",
    "get_example_by_id",
    "get_store",
    "list_categories",
    "list_examples_by_category",
    "list_examples_by_category_and_version",
    "list_examples_by_version",
    "resolve_cross_version_link",
]

"""Tests for the compiled-in catalog tables."""

from patterndiff.catalog.data import CATEGORIES, EXAMPLES
from patterndiff.catalog.models import MigrationImpact


class TestCategories:
    def test_five_categories_with_unique_ids(self):
        assert len(CATEGORIES) == 5
        assert len({c.id for c in CATEGORIES}) == 5

    def test_orders(self):
        assert [c.order for c in CATEGORIES] == [1, 2, 3, 4, 5]


class TestExamples:
    def test_eleven_examples_with_unique_ids(self):
        assert len(EXAMPLES) == 11
        assert len({ex.id for ex in EXAMPLES}) == 11

    def test_ids_carry_version_suffix(self):
        for ex in EXAMPLES:
            assert ex.id.endswith(f"-v{ex.version}")

    def test_required_content_present(self):
        for ex in EXAMPLES:
            assert ex.title
            assert ex.code_snippet_after.strip()
            assert ex.key_changes
            assert ex.blog_post_link.startswith("https://")
            assert isinstance(ex.migration_impact, MigrationImpact)

    def test_snippets_are_dedented(self):
        for ex in EXAMPLES:
            assert not ex.code_snippet_after.startswith((" ", "\n"))

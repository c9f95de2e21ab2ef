"""Tests for patterndiff.catalog.store."""

import pytest

from patterndiff.catalog.data import CATEGORIES, EXAMPLES
from patterndiff.catalog.store import (
    ExampleStore,
    get_example_by_id,
    list_categories,
    list_examples_by_category_and_version,
    resolve_cross_version_link,
)
from patterndiff.core.errors import CatalogIntegrityError, InvalidVersionError


class TestListCategories:
    """Categories are returned in display order."""

    def test_sorted_by_order(self, store):
        orders = [c.order for c in store.list_categories()]
        assert orders == sorted(orders)

    def test_lower_order_first(self, small_store):
        """'build' (order 1) precedes 'routing' (order 2) regardless of definition order."""
        assert [c.id for c in small_store.list_categories()] == ["build", "routing"]

    def test_ties_keep_definition_order(self, category_factory):
        store = ExampleStore(
            [
                category_factory("z", order=1),
                category_factory("a", order=1),
                category_factory("m", order=0),
            ],
            [],
        )
        assert [c.id for c in store.list_categories()] == ["m", "z", "a"]

    def test_returns_fresh_list(self, store):
        first = store.list_categories()
        first.clear()
        assert len(store.list_categories()) == len(CATEGORIES)

    def test_for_version(self, store):
        v15 = [c.id for c in store.list_categories_for_version(15)]
        v16 = [c.id for c in store.list_categories_for_version(16)]
        assert "developer-experience" in v15
        assert "server-components" not in v15
        assert "server-components" in v16
        assert "developer-experience" not in v16


class TestListExamples:
    """Filtering by version and category."""

    def test_by_version(self, store):
        v15 = store.list_examples_by_version(15)
        v16 = store.list_examples_by_version(16)
        assert all(ex.version == 15 for ex in v15)
        assert all(ex.version == 16 for ex in v16)
        assert len(v15) + len(v16) == len(EXAMPLES)

    def test_by_version_keeps_table_order(self, store):
        expected = [ex.id for ex in EXAMPLES if ex.version == 16]
        assert [ex.id for ex in store.list_examples_by_version(16)] == expected

    def test_every_example_listed_under_its_category(self, store):
        for example in EXAMPLES:
            assert example in store.list_examples_by_category(example.category)

    def test_unknown_category_is_empty(self, store):
        assert store.list_examples_by_category("does-not-exist") == []

    def test_by_category_and_version(self, store):
        result = store.list_examples_by_category_and_version("data-fetching-caching", 15)
        assert [ex.id for ex in result] == ["async-request-apis-v15", "caching-semantics-v15"]

    def test_by_category_and_version_can_be_empty(self, store):
        assert store.list_examples_by_category_and_version("server-components", 15) == []

    @pytest.mark.parametrize("version", [14, 17, "16", None])
    def test_invalid_version_raises(self, store, version):
        with pytest.raises(InvalidVersionError):
            store.list_examples_by_version(version)
        with pytest.raises(InvalidVersionError):
            store.list_examples_by_category_and_version("routing-navigation", version)

    def test_count_examples_by_category(self, store):
        counts = store.count_examples_by_category(16)
        assert list(counts) == [c.id for c in store.list_categories()]
        assert counts["routing-navigation"] == 2
        assert counts["developer-experience"] == 0


class TestLookups:
    """Lookup by id."""

    def test_every_example_found_by_id(self, store):
        for example in EXAMPLES:
            assert store.get_example_by_id(example.id) == example

    def test_missing_example_is_none(self, store):
        assert store.get_example_by_id("async-params-v16") is None

    def test_category_lookup(self, store):
        assert store.get_category_by_id("build-performance").name == "Build & Performance"
        assert store.get_category_by_id("nope") is None


class TestCrossVersionLinks:
    """Resolution of related examples in the other version."""

    def test_flag_false_means_no_link(self, store):
        for example in EXAMPLES:
            if not example.available_in_other_version:
                assert store.resolve_cross_version_link(example) is None

    def test_resolved_link_points_at_other_version(self, store):
        for example in EXAMPLES:
            link = store.resolve_cross_version_link(example)
            if link is not None:
                assert link.other_version == link.example.version
                assert link.other_version != example.version
                assert link.category_id == link.example.category

    def test_linked_pair(self, small_store):
        link = small_store.resolve_cross_version_link(small_store.get_example_by_id("a"))
        assert link.example.id == "b"
        assert link.other_version == 16
        assert link.category_id == "routing"

    def test_dangling_link_is_none(self, small_store):
        assert small_store.resolve_cross_version_link(small_store.get_example_by_id("c")) is None

    def test_links_are_not_symmetric(self, small_store):
        """'b' is the target of 'a' but does not itself link back."""
        assert small_store.resolve_cross_version_link(small_store.get_example_by_id("b")) is None

    def test_real_catalog_links(self, store):
        turbopack = store.get_example_by_id("turbopack-dev-v15")
        assert store.resolve_cross_version_link(turbopack).example.id == "turbopack-builds-v16"
        async_apis = store.get_example_by_id("async-request-apis-v15")
        assert store.resolve_cross_version_link(async_apis) is None

    def test_same_version_link_is_none(self, category_factory, example_factory):
        store = ExampleStore(
            [category_factory("routing", order=1)],
            [
                example_factory("a", available_in_other_version=True, related_example_id="b"),
                example_factory("b"),
            ],
        )
        assert store.resolve_cross_version_link(store.get_example_by_id("a")) is None


class TestIntegrity:
    """Structurally broken tables are rejected at construction."""

    def test_duplicate_example_id(self, category_factory, example_factory):
        with pytest.raises(CatalogIntegrityError, match="Duplicate example id"):
            ExampleStore(
                [category_factory("routing", order=1)],
                [example_factory("a"), example_factory("a")],
            )

    def test_duplicate_category_id(self, category_factory):
        with pytest.raises(CatalogIntegrityError, match="Duplicate category id"):
            ExampleStore([category_factory("x", order=1), category_factory("x", order=2)], [])

    def test_unknown_category(self, category_factory, example_factory):
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ExampleStore([category_factory("routing", order=1)], [example_factory("a", category="forms")])
        assert exc_info.value.context.example_id == "a"
        assert exc_info.value.context.category_id == "forms"

    def test_unsupported_example_version(self, category_factory, example_factory):
        with pytest.raises(CatalogIntegrityError, match="unsupported version"):
            ExampleStore([category_factory("routing", order=1)], [example_factory("a", version=14)])


class TestReporting:
    """Statistics and validation."""

    def test_stats(self, store):
        stats = store.stats()
        assert stats["categories"] == 5
        assert stats["examples"] == 11
        assert stats["examples_by_version"] == {15: 5, 16: 6}
        assert stats["cross_version_links"] == 2

    def test_real_catalog_is_valid_with_warnings(self, store):
        report = store.validate()
        assert report.valid
        assert report.issues == []
        assert any("async-params-v16" in w for w in report.warnings)

    def test_small_store_warnings(self, small_store):
        report = small_store.validate()
        assert report.valid
        assert report.warnings == ["c: related example missing does not exist"]

    def test_same_version_link_is_an_issue(self, category_factory, example_factory):
        store = ExampleStore(
            [category_factory("routing", order=1)],
            [
                example_factory("a", available_in_other_version=True, related_example_id="b"),
                example_factory("b"),
            ],
        )
        report = store.validate()
        assert not report.valid
        assert report.issues == ["a: related example b has the same version (15)"]

    def test_empty_category_warning(self, category_factory):
        report = ExampleStore([category_factory("empty", order=1)], []).validate()
        assert report.warnings == ["category empty has no examples"]


class TestModuleFunctions:
    """Module-level functions delegate to the default store."""

    def test_delegation(self):
        assert [c.id for c in list_categories()][0] == "data-fetching-caching"
        assert get_example_by_id("form-component-v15").category == "routing-navigation"
        assert len(list_examples_by_category_and_version("routing-navigation", 16)) == 2
        assert resolve_cross_version_link(get_example_by_id("turbopack-builds-v16")).other_version == 15

"""
Shared pytest fixtures for patterndiff tests.

This module provides:
- Settings/adapter cache reset and environment isolation
- The default catalog store
- A small hand-built store for invariant tests
- Example/category factories
"""

import sys
from pathlib import Path

import pytest
import structlog

# Ensure patterndiff package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from patterndiff.catalog.models import Category, MigrationImpact, PatternExample
from patterndiff.catalog.store import ExampleStore, get_store
from patterndiff.core.settings import reset_settings
from patterndiff.highlight.adapter import reset_adapter

_ENV_VARS = (
    "PATTERNDIFF_LOG_LEVEL",
    "PATTERNDIFF_JSON_LOGS",
    "PATTERNDIFF_DEFAULT_LANGUAGE",
    "PATTERNDIFF_HIGHLIGHT_THEME",
    "PATTERNDIFF_HIGHLIGHT_TIMEOUT",
    "PATTERNDIFF_OUTPUT_DIR",
    "PATTERNDIFF_SITE_TITLE",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Every test starts from default settings with no cached adapter."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    reset_settings()
    reset_adapter()
    yield
    reset_settings()
    reset_adapter()
    # CLI runs bind structlog to streams that are gone after the test
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def store() -> ExampleStore:
    """The store over the compiled-in catalog."""
    return get_store()


def make_category(id: str, order: int, **overrides) -> Category:
    defaults = {
        "name": id.replace("-", " ").title(),
        "description": f"Patterns for {id}",
    }
    defaults.update(overrides)
    return Category(id=id, order=order, **defaults)


def make_example(id: str, version: int = 15, category: str = "routing", **overrides) -> PatternExample:
    defaults = {
        "title": id.replace("-", " ").title(),
        "description": "What changed",
        "why_it_matters": "Why it matters",
        "before_after_summary": "Before: a. After: b.",
        "is_breaking_change": False,
        "migration_impact": MigrationImpact.LOW,
        "code_snippet_after": "const a = 1 < 2;",
        "key_changes": ("first change",),
        "blog_post_link": "https://nextjs.org/blog",
    }
    defaults.update(overrides)
    return PatternExample(id=id, version=version, category=category, **defaults)


@pytest.fixture
def category_factory():
    return make_category


@pytest.fixture
def example_factory():
    return make_example


@pytest.fixture
def small_store() -> ExampleStore:
    """Two categories (defined out of order) and a linked v15/v16 pair."""
    categories = [
        make_category("routing", order=2),
        make_category("build", order=1),
    ]
    examples = [
        make_example(
            "a",
            version=15,
            category="routing",
            available_in_other_version=True,
            related_example_id="b",
            code_snippet_before="const old = <div/>;",
        ),
        make_example("b", version=16, category="routing"),
        make_example(
            "c",
            version=15,
            category="build",
            available_in_other_version=True,
            related_example_id="missing",
        ),
    ]
    return ExampleStore(categories, examples)

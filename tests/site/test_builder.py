"""Tests for patterndiff.site.builder."""

import pytest

from patterndiff.core.errors import InvalidVersionError
from patterndiff.core.settings import PatternDiffSettings
from patterndiff.highlight.adapter import HighlightAdapter
from patterndiff.site.builder import SiteBuilder


class TestBuild:
    """Writing the static site."""

    def test_writes_expected_files(self, store, tmp_path):
        builder = SiteBuilder(store=store, output_dir=tmp_path / "out")
        written = builder.build([15])

        assert set(written) == {
            "15/index.html",
            "15/404.html",
            "15/examples/data-fetching-caching/index.html",
            "15/examples/routing-navigation/index.html",
            "15/examples/build-performance/index.html",
            "15/examples/developer-experience/index.html",
        }
        for relative, size in written.items():
            path = tmp_path / "out" / relative
            assert path.is_file()
            assert path.stat().st_size == size

    def test_empty_category_not_written(self, store, tmp_path):
        SiteBuilder(store=store, output_dir=tmp_path).build([16])
        assert not (tmp_path / "16/examples/developer-experience").exists()
        assert (tmp_path / "16/examples/server-components/index.html").is_file()

    def test_all_versions_by_default(self, small_store, tmp_path):
        written = SiteBuilder(store=small_store, output_dir=tmp_path).build()
        assert "15/index.html" in written
        assert "16/index.html" in written
        assert "16/examples/build/index.html" not in written

    def test_category_page_contains_highlighted_code(self, store, tmp_path):
        SiteBuilder(store=store, output_dir=tmp_path).build([16])
        html = (tmp_path / "16/examples/build-performance/index.html").read_text(encoding="utf-8")
        assert 'class="highlight"' in html
        assert "See in Next.js 15 →" in html

    def test_fallback_markup_when_engine_fails(self, small_store, tmp_path):
        adapter = HighlightAdapter(default_language="not-a-real-language")
        settings = PatternDiffSettings(default_language="not-a-real-language")
        SiteBuilder(store=small_store, settings=settings, adapter=adapter, output_dir=tmp_path).build([15])
        html = (tmp_path / "15/examples/build/index.html").read_text(encoding="utf-8")
        assert '<pre><code class="language-not-a-real-language">const a = 1 &lt; 2;</code></pre>' in html

    def test_output_dir_from_settings(self, small_store, tmp_path):
        settings = PatternDiffSettings(output_dir=tmp_path / "from-settings")
        builder = SiteBuilder(store=small_store, settings=settings)
        builder.build([16])
        assert builder.output_dir == tmp_path / "from-settings"
        assert (tmp_path / "from-settings/16/index.html").is_file()

    def test_adapter_from_given_settings(self, small_store):
        settings = PatternDiffSettings(highlight_theme="monokai", highlight_timeout=1.5)
        builder = SiteBuilder(store=small_store, settings=settings)
        assert builder.adapter.theme == "monokai"
        assert builder.adapter.timeout == 1.5

    def test_invalid_version_writes_nothing(self, small_store, tmp_path):
        with pytest.raises(InvalidVersionError):
            SiteBuilder(store=small_store, output_dir=tmp_path).build([15, 14])
        assert list(tmp_path.iterdir()) == []


class TestRenderVersion:
    @pytest.mark.asyncio
    async def test_returns_pages_without_writing(self, small_store, tmp_path):
        builder = SiteBuilder(store=small_store, output_dir=tmp_path / "out")
        pages = await builder.render_version(15)
        assert set(pages) == {
            "15/index.html",
            "15/404.html",
            "15/examples/build/index.html",
            "15/examples/routing/index.html",
        }
        assert not (tmp_path / "out").exists()

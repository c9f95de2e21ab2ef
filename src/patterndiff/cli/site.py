"""
CLI: ``patterndiff highlight|build`` - snippet highlighting and site generation.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from patterndiff.cli.utils import console, fail, print_table
from patterndiff.core.errors import PatternDiffError
from patterndiff.core.settings import get_settings
from patterndiff.highlight.adapter import HighlightAdapter


def highlight(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Source file"),
    language: str | None = typer.Option(None, "--language", "-l", help="Language tag (settings default if omitted)"),
    theme: str | None = typer.Option(None, "--theme", "-t", help="Pygments style name"),
) -> None:
    """Print the highlighted HTML fragment for FILE."""
    settings = get_settings()
    adapter = HighlightAdapter(
        theme=theme or settings.highlight_theme,
        default_language=settings.default_language,
    )
    # echo, not console.print: the fragment must not go through rich markup
    typer.echo(adapter.highlight(file.read_text(encoding="utf-8"), language))


def build(
    versions: list[int] | None = typer.Option(None, "--version", "-v", help="Version to build (repeatable; all if omitted)"),
    output_dir: Path | None = typer.Option(None, "--output-dir", "-o", help="Output directory (settings value if omitted)"),
) -> None:
    """Generate the static site."""
    from patterndiff.site.builder import SiteBuilder

    try:
        builder = SiteBuilder(output_dir=output_dir)
        written = builder.build(versions or None)
    except PatternDiffError as e:
        fail(e)

    print_table(
        [{"path": path, "bytes": size} for path, size in written.items()],
        title="Pages",
    )
    total_kb = sum(written.values()) / 1024
    console.print(
        f"[green]✓[/green] Wrote {len(written)} pages ({total_kb:.1f} KB) "
        f"to {escape(str(builder.output_dir))}"
    )

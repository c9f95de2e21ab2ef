"""
CLI: ``patterndiff categories|examples|show|validate`` - catalog inspection.
"""

from __future__ import annotations

import typer
from rich.markup import escape

from patterndiff.catalog.models import SUPPORTED_VERSIONS
from patterndiff.catalog.store import get_store
from patterndiff.cli.utils import console, fail, print_json, print_mapping, print_table, to_dict
from patterndiff.core.errors import PatternDiffError


def categories(
    version: int | None = typer.Option(None, "--version", "-v", help="Only categories shown under this version"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List categories in display order."""
    store = get_store()
    try:
        items = store.list_categories() if version is None else store.list_categories_for_version(version)
    except PatternDiffError as e:
        fail(e)

    if as_json:
        print_json([to_dict(c) for c in items])
        return

    print_table(
        [
            {
                "id": c.id,
                "name": f"{c.icon} {c.name}" if c.icon else c.name,
                "order": c.order,
                "versions": ", ".join(str(v) for v in sorted(c.versions)) if c.versions else "all",
            }
            for c in items
        ],
        title="Categories",
    )


def examples(
    version: int | None = typer.Option(None, "--version", "-v", help="Filter by version (15 or 16)"),
    category: str | None = typer.Option(None, "--category", "-c", help="Filter by category id"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List pattern examples, optionally filtered by version and category."""
    store = get_store()
    try:
        if version is not None and category is not None:
            items = store.list_examples_by_category_and_version(category, version)
        elif version is not None:
            items = store.list_examples_by_version(version)
        elif category is not None:
            items = store.list_examples_by_category(category)
        else:
            items = [ex for v in SUPPORTED_VERSIONS for ex in store.list_examples_by_version(v)]
    except PatternDiffError as e:
        fail(e)

    if as_json:
        print_json([to_dict(ex) for ex in items])
        return

    print_table(
        [
            {
                "id": ex.id,
                "version": ex.version,
                "category": ex.category,
                "breaking": "yes" if ex.is_breaking_change else "",
                "impact": ex.migration_impact.value,
                "title": ex.title,
            }
            for ex in items
        ],
        title="Examples",
    )


def show(
    example_id: str = typer.Argument(..., help="Example id"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show one example and its cross-version link."""
    store = get_store()
    example = store.get_example_by_id(example_id)
    if example is None:
        fail(f"Example not found: {example_id}")

    link = store.resolve_cross_version_link(example)

    if as_json:
        payload = to_dict(example)
        payload["cross_version_link"] = (
            {"example_id": link.example.id, "version": link.other_version, "category_id": link.category_id}
            if link
            else None
        )
        print_json(payload)
        return

    print_mapping(
        {
            "version": example.version,
            "category": example.category,
            "breaking change": example.is_breaking_change,
            "migration impact": example.migration_impact.value,
            "summary": example.before_after_summary,
            "blog post": example.blog_post_link,
        },
        title=example.title,
    )
    console.print("\n[bold]Key changes:[/bold]")
    for change in example.key_changes:
        console.print(f"  • {escape(change)}")
    if link:
        console.print(f"\n[green]See in Next.js {link.other_version}:[/green] {link.example.id}")
    else:
        console.print(f"\n[dim]Not available in Next.js {example.other_version}[/dim]")


def validate(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Check catalog cross-references. Exits 1 when issues are found."""
    report = get_store().validate()

    if as_json:
        print_json(to_dict(report))
    else:
        print_mapping(report.stats, title="Catalog")
        for warning in report.warnings:
            console.print(f"[yellow]⚠[/yellow] {escape(warning)}")
        for issue in report.issues:
            console.print(f"[red]✗[/red] {escape(issue)}")
        if report.valid:
            console.print("[green]✓ Catalog is valid[/green]")

    if not report.valid:
        raise typer.Exit(code=1)

"""
Root Typer application for the patterndiff CLI.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

import typer
from typer import Typer

from patterndiff.cli import catalog, site
from patterndiff.cli.utils import fail
from patterndiff.core.errors import ConfigError
from patterndiff.core.logging import configure_logging
from patterndiff.core.settings import get_settings

app = Typer(
    name="patterndiff",
    help="patterndiff - Next.js 15/16 pattern comparisons.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        try:
            v = pkg_version("patterndiff")
        except PackageNotFoundError:
            from patterndiff import __version__ as v
        typer.echo(f"patterndiff {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """patterndiff CLI - browse the catalog, highlight snippets, build the site."""
    try:
        settings = get_settings()
    except ConfigError as e:
        fail(e)
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


# ── Commands ─────────────────────────────────────────────────────────────

app.command("categories")(catalog.categories)
app.command("examples")(catalog.examples)
app.command("show")(catalog.show)
app.command("validate")(catalog.validate)
app.command("highlight")(site.highlight)
app.command("build")(site.build)

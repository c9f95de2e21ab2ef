"""
CLI utility helpers - output formatting and error reporting.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from patterndiff.core.errors import PatternDiffError

console = Console()
err_console = Console(stderr=True)


# ── Serialization ────────────────────────────────────────────────────────


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, frozenset | set):
        return sorted(value)
    return str(value)


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert a catalog record (dataclass) or dict to a plain dict."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, dict):
        return obj
    return {"value": str(obj)}


def print_json(payload: Any) -> None:
    """Print ``payload`` as JSON on stdout."""
    console.print_json(json.dumps(payload, default=_json_default))


# ── Errors ───────────────────────────────────────────────────────────────


def fail(error: PatternDiffError | str) -> NoReturn:
    """Report an error on stderr and exit with code 1."""
    if isinstance(error, PatternDiffError):
        err_console.print(f"[bold red]Error[/bold red] ({type(error).__name__}): {escape(error.message)}")
    else:
        err_console.print(f"[bold red]Error[/bold red]: {escape(error)}")
    raise typer.Exit(code=1)


# ── Tables ───────────────────────────────────────────────────────────────


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of flat dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for index, column in enumerate(rows[0]):
        table.add_column(column, no_wrap=index == 0, overflow="fold")
    for row in rows:
        table.add_row(*(escape(str(v)) for v in row.values()))
    console.print(table)


def print_mapping(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{escape(title)}[/bold]")
    for key, value in data.items():
        console.print(f"  [cyan]{key}[/cyan]: {escape(str(value))}")

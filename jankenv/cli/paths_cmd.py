"""Paths command: show every resolved location."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from jankenv.cli._helpers import console


def paths(
    version_string: Annotated[
        str | None,
        typer.Option("--version-string", help="Cache version (default: this build's)"),
    ] = None,
) -> None:
    """Resolve and print the toolchain's directories."""
    from jankenv import (
        binary_cache_dir,
        binary_version,
        process_dir,
        process_path,
        resource_dir,
        user_cache_dir,
        user_config_dir,
        user_home_dir,
    )
    from jankenv.errors import JankEnvError

    lookups: list[tuple[str, Callable[[], object]]] = [
        ("binary version", binary_version),
        ("home", user_home_dir),
        ("config", user_config_dir),
        ("cache", lambda: user_cache_dir(version_string)),
        ("binary cache", lambda: binary_cache_dir(version_string)),
        ("process path", process_path),
        ("process dir", process_dir),
        ("resources", resource_dir),
    ]

    table = Table(title="jank locations")
    table.add_column("Location", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")

    failed = False
    for label, lookup in lookups:
        try:
            value = escape(str(lookup()))
        except (JankEnvError, ValueError) as exc:
            failed = True
            value = f"[red]Error:[/red] {escape(str(exc))}"
        table.add_row(label, value)

    console.print(table)
    if failed:
        raise typer.Exit(1)

"""Mktemp command: create a unique, empty temporary file."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

from jankenv.cli._helpers import console


def mktemp(
    prefix: Annotated[str, typer.Option("--prefix", help="File name prefix")] = "jank_",
) -> None:
    """Create an empty temporary file and print its path."""
    from jankenv.errors import TempFileCreationError
    from jankenv.tempfiles import make_temp_file

    try:
        path = make_temp_file(prefix)
    except (TempFileCreationError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None
    typer.echo(str(path))

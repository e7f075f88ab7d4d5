"""Flags command: print an argument list with system flags appended."""

from __future__ import annotations

from typing import Annotated

import typer


def flags(
    args: Annotated[list[str] | None, typer.Argument(help="Arguments to augment")] = None,
) -> None:
    """Print ARGS followed by the platform's mandatory flags, one per line."""
    from jankenv.flags import add_system_flags

    augmented = list(args or [])
    add_system_flags(augmented)
    for arg in augmented:
        typer.echo(arg)

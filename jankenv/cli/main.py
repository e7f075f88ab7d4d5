"""Typer CLI for jankenv: wiring hub for command modules."""

from __future__ import annotations

from typing import Annotated

import typer

from jankenv.cli._helpers import console

app = typer.Typer(
    name="jankenv",
    help="Inspect the directories and flags the jank toolchain resolves.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def version_callback(value: bool) -> None:
    if value:
        from jankenv import __version__

        console.print(f"jankenv {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """jankenv: cross-platform locations for the jank toolchain."""
    from jankenv._log import setup_logging

    setup_logging(verbose=verbose)


# ---------------------------------------------------------------------------
# Command registrations: plain functions from *_cmd modules
# ---------------------------------------------------------------------------

from jankenv.cli.flags_cmd import flags  # noqa: E402
from jankenv.cli.paths_cmd import paths  # noqa: E402
from jankenv.cli.tempfile_cmd import mktemp  # noqa: E402

app.command()(paths)
app.command()(flags)
app.command()(mktemp)


def app_entry() -> None:
    """Entry point for the CLI."""
    app()

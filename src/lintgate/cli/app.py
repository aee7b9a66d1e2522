# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .doctor import doctor_command
from .run import run_command

app = typer.Typer(
    name="lintgate",
    help="Run a linter with auto-fix and report a hook-friendly exit status.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print the version and exit when ``--version`` is given.

    Args:
        value: Flag value parsed by Typer.
    """

    if value:
        typer.echo(f"lintgate {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Run a linter with auto-fix and report a hook-friendly exit status."""


app.command("run")(run_command)
app.command("doctor")(doctor_command)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]

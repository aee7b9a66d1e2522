# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Environment diagnostics for the lint gate."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from ..config import ConfigError, resolve_root
from ..constants import DEFAULT_TOOL, PROJECT_DIR_ENV, TOOL_ENV
from ..process_utils import run_combined


@dataclass(slots=True)
class EnvironmentCheck:
    """Represents the outcome of a doctor environment check."""

    name: str
    ok: bool
    detail: str

    @property
    def status(self) -> str:
        """Return the label shown in the status column.

        Returns:
            str: ``"ok"`` when the check passed, ``"missing"`` otherwise.
        """

        return "ok" if self.ok else "missing"


def _check_root(root: Path | None, environ: Mapping[str, str]) -> EnvironmentCheck:
    """Resolve the project root from ``root`` or the environment.

    Args:
        root: Explicit root from the command line, if any.
        environ: Environment consulted when ``root`` is ``None``.

    Returns:
        EnvironmentCheck: Outcome with the resolved path or the failure reason.
    """

    try:
        resolved = resolve_root(root if root is not None else environ.get(PROJECT_DIR_ENV))
    except ConfigError as exc:
        return EnvironmentCheck(name="Project root", ok=False, detail=str(exc))
    return EnvironmentCheck(name="Project root", ok=True, detail=str(resolved))


def _check_tool(tool: str) -> EnvironmentCheck:
    """Locate ``tool`` and report the first line of its ``--version`` output.

    Args:
        tool: Executable name or path to check.

    Returns:
        EnvironmentCheck: Outcome with the tool path and version, or the failure reason.
    """

    path = shutil.which(tool)
    if path is None:
        return EnvironmentCheck(name=f"Linter ({tool})", ok=False, detail="not found on PATH")
    try:
        completed = run_combined([path, "--version"])
    except OSError as exc:
        return EnvironmentCheck(name=f"Linter ({tool})", ok=False, detail=str(exc))
    version = (completed.stdout or b"").decode("utf-8", errors="replace").strip().splitlines()
    detail = f"{path} ({version[0]})" if version else path
    return EnvironmentCheck(name=f"Linter ({tool})", ok=completed.returncode == 0, detail=detail)


def run_doctor(
    root: Path | None,
    *,
    tool: str | None = None,
    environ: Mapping[str, str] | None = None,
    console: Console | None = None,
) -> int:
    """Run diagnostic checks and return an exit status (0 healthy, 1 otherwise).

    Args:
        root: Explicit project root, or ``None`` to read ``CLAUDE_PROJECT_DIR``.
        tool: Linter to check; defaults to ``LINTGATE_TOOL`` or ``ruff``.
        environ: Environment mapping; defaults to ``os.environ``.
        console: Console receiving the report; defaults to a stderr console.

    Returns:
        int: ``0`` when every check passed, ``1`` otherwise.
    """

    env = os.environ if environ is None else environ
    console = console or Console(stderr=True)
    console.print(Rule("[bold cyan]lintgate Doctor[/bold cyan]"))

    selected_tool = tool or env.get(TOOL_ENV, "").strip() or DEFAULT_TOOL
    checks = [_check_root(root, env), _check_tool(selected_tool)]

    table = Table(title="Environment", box=box.SIMPLE, expand=True)
    table.add_column("Check", style="bold")
    table.add_column("Status", style="bold")
    table.add_column("Details", overflow="fold")
    for check in checks:
        style = "green" if check.ok else "red"
        table.add_row(check.name, f"[{style}]{check.status}[/{style}]", check.detail)
    console.print(table)
    return 0 if all(check.ok for check in checks) else 1


def doctor_command(
    root: Annotated[
        Path | None,
        typer.Option("--root", help="Project root to check (defaults to $CLAUDE_PROJECT_DIR)."),
    ] = None,
    tool: Annotated[str | None, typer.Option("--tool", help="Linter executable to check.")] = None,
) -> None:
    """Report whether the project root and linter are usable."""

    raise typer.Exit(code=run_doctor(root, tool=tool))


__all__ = ["EnvironmentCheck", "doctor_command", "run_doctor"]

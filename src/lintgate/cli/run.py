# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command running the linter as a blocking hook."""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Annotated

import typer

from ..config import ConfigError, LintGateConfig, load_config
from ..constants import NO_COLOR_ENV
from ..models import LintOutcome
from ..runner import LintRunner
from .shared import CLIError, CLILogger, build_cli_logger


def _resolve_config(
    *,
    root: Path | None,
    tool: str | None,
    pattern: str | None,
    no_fix: bool,
) -> LintGateConfig:
    """Load configuration from the environment and CLI overrides.

    Args:
        root: Optional project root from ``--root``.
        tool: Optional linter executable from ``--tool``.
        pattern: Optional include glob from ``--pattern``.
        no_fix: ``True`` when ``--no-fix`` was passed.

    Returns:
        LintGateConfig: Validated configuration.

    Raises:
        CLIError: If the configuration is invalid.
    """

    try:
        return load_config(
            os.environ,
            root=root,
            tool=tool,
            pattern=pattern,
            fix=False if no_fix else None,
        )
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def execute_run(config: LintGateConfig, *, logger: CLILogger) -> int:
    """Run the linter for ``config`` and return the hook exit status.

    Args:
        config: Validated configuration.
        logger: Logger receiving verbose diagnostics on stderr.

    Returns:
        int: ``0`` when the linter reported a clean tree, ``2`` otherwise.
    """

    runner = LintRunner(config)
    logger.debug(f"root={config.root} command={shlex.join(runner.command())}")
    status = runner.run()
    result = runner.last_result
    if result is None or not logger.debug_enabled:
        return status
    logger.debug(f"returncode={result.returncode} outcome={result.outcome.value} exit={status}")
    if result.outcome is LintOutcome.CLEAN:
        logger.ok(f"{config.tool} reported no remaining issues")
    elif result.outcome is LintOutcome.VIOLATIONS:
        logger.warn(f"{config.tool} left violations that could not be fixed automatically")
    else:
        logger.fail(f"{config.tool} terminated abnormally with status {result.returncode}")
    return status


def run_command(
    root: Annotated[
        Path | None,
        typer.Option("--root", help="Project root to lint (defaults to $CLAUDE_PROJECT_DIR)."),
    ] = None,
    tool: Annotated[str | None, typer.Option("--tool", help="Linter executable to run.")] = None,
    pattern: Annotated[str | None, typer.Option("--pattern", help="Glob restricting linted files.")] = None,
    no_fix: Annotated[bool, typer.Option("--no-fix", help="Report without applying auto-fixes.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Print the command and outcome to stderr.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in diagnostics.")] = False,
) -> None:
    """Lint the project once, forwarding linter output; exit 0 when clean, 2 otherwise."""

    emoji = not no_emoji
    logger = build_cli_logger(emoji=emoji, debug=verbose, no_color=NO_COLOR_ENV in os.environ)
    try:
        config = _resolve_config(root=root, tool=tool, pattern=pattern, no_fix=no_fix)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    raise typer.Exit(code=execute_run(config, logger=logger))


__all__ = ["execute_run", "run_command"]

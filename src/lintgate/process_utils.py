# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import os
import shutil

# Bandit: subprocess usage is intentional; the wrapper passes argument lists
# and never enables ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path


def _has_directory_component(head: str) -> bool:
    """Return ``True`` when ``head`` names a path rather than a bare command.

    Args:
        head: Executable portion of a command line.

    Returns:
        bool: ``True`` when ``head`` contains a path separator.
    """

    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    return any(sep in head for sep in separators)


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the executable replaced by an absolute path.

    Relative paths such as ``./bin/ruff`` are anchored to the caller's working
    directory, not the child's ``cwd``. Bare command names are looked up on
    ``PATH``.

    Args:
        args: Command and arguments supplied by the caller.

    Returns:
        list[str]: Command whose first element is absolute.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If a bare command name is not found on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]
    if _has_directory_component(head):
        return [str(head_path.resolve()), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_combined(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[bytes]:
    """Execute *args* and capture stdout and stderr interleaved as raw bytes.

    The output is not decoded, so line endings and invalid UTF-8 sequences
    survive untouched. The call never raises for a non-zero exit status;
    callers inspect ``returncode`` themselves. Launch failures (missing or
    non-executable binaries) propagate as :class:`OSError`.

    Args:
        args: Command and arguments; the executable is resolved on ``PATH``.
        cwd: Optional working directory for the child process.
        env: Optional environment replacing the inherited one.

    Returns:
        subprocess.CompletedProcess[bytes]: Completed process whose ``stdout``
        holds the combined output and whose ``stderr`` is ``None``.
    """

    normalized = _normalize_args(args)
    # Bandit: commands come from validated configuration; no shell expansion.
    return subprocess.run(  # nosec B603
        normalized,
        cwd=str(cwd) if cwd is not None else None,
        env=dict(env) if env is not None else None,
        check=False,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        stdin=subprocess.DEVNULL,
    )


__all__ = ["run_combined"]

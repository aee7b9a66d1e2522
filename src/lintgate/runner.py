# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the configured linter once and translate its status for hook callers."""

from __future__ import annotations

import io
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, TextIO

from .config import LintGateConfig
from .constants import STATUS_NOT_EXECUTABLE, STATUS_NOT_FOUND
from .models import InvocationResult, LintOutcome
from .process_utils import run_combined

Invoker = Callable[[Sequence[str], Path], InvocationResult]
OutputStream = TextIO | BinaryIO


def toml_string(value: str) -> str:
    """Return ``value`` quoted as a TOML basic string.

    Args:
        value: Raw text to embed in an inline TOML override.

    Returns:
        str: Double-quoted string with backslashes, quotes and control
        characters escaped.
    """

    escaped: list[str] = []
    for char in value:
        if char == "\\":
            escaped.append("\\\\")
        elif char == '"':
            escaped.append('\\"')
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            escaped.append(f"\\u{ord(char):04X}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


def build_command(config: LintGateConfig) -> list[str]:
    """Return the linter command line for ``config``.

    The include pattern is passed as an inline configuration override so the
    linter only considers matching files beneath the root.

    Args:
        config: Resolved lint gate configuration.

    Returns:
        list[str]: Command and arguments ready for :func:`invoke`.
    """

    command = [config.tool, "check"]
    if config.fix:
        command.append("--fix")
    command.extend(["--config", f"include = [{toml_string(config.pattern)}]"])
    command.extend(config.extra_args)
    command.append(str(config.root))
    return command


def invoke(command: Sequence[str], cwd: Path) -> InvocationResult:
    """Run ``command`` in ``cwd`` and capture its combined output and status.

    A linter that cannot be launched is reported as an abnormal termination
    using the shell's 127/126 statuses, with the launch error as its output.

    Args:
        command: Command and arguments to execute.
        cwd: Working directory for the child process.

    Returns:
        InvocationResult: Captured bytes and exit status.
    """

    try:
        completed = run_combined(command, cwd=cwd)
    except FileNotFoundError as exc:
        return InvocationResult(command=tuple(command), output=f"{exc}\n".encode(), returncode=STATUS_NOT_FOUND)
    except OSError as exc:
        return InvocationResult(command=tuple(command), output=f"{exc}\n".encode(), returncode=STATUS_NOT_EXECUTABLE)
    return InvocationResult(command=tuple(command), output=completed.stdout or b"", returncode=completed.returncode)


def classify(returncode: int) -> LintOutcome:
    """Return the :class:`LintOutcome` for a linter ``returncode``."""

    return LintOutcome.from_returncode(returncode)


def exit_status_for(returncode: int) -> int:
    """Map a linter ``returncode`` onto the wrapper's 0/2 exit contract."""

    return classify(returncode).exit_status


def forward_output(data: bytes, stream: OutputStream) -> None:
    """Write ``data`` to ``stream`` without re-encoding or newline translation.

    Binary streams and text streams exposing a ``buffer`` receive the bytes
    as-is. Text-only streams such as :class:`io.StringIO` receive the bytes
    decoded with ``surrogateescape`` so undecodable bytes stay recoverable.

    Args:
        data: Raw linter output.
        stream: Destination stream, usually ``sys.stdout``.
    """

    if isinstance(stream, io.BufferedIOBase | io.RawIOBase):
        stream.write(data)
        stream.flush()
        return
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        # Drain pending text so ordering with earlier writes is preserved.
        stream.flush()
        buffer.write(data)
        buffer.flush()
        return
    stream.write(data.decode("utf-8", errors="surrogateescape"))
    stream.flush()


@dataclass(slots=True)
class LintRunner:
    """Execute the linter once, forward its output, and report a hook status."""

    config: LintGateConfig
    invoker: Invoker = invoke
    stream: OutputStream | None = None
    last_result: InvocationResult | None = field(default=None, init=False)

    def command(self) -> list[str]:
        """Return the command line this runner executes.

        Returns:
            list[str]: Linter command built from :attr:`config`.
        """

        return build_command(self.config)

    def run(self) -> int:
        """Run the linter and return ``0`` on a clean tree, ``2`` otherwise.

        Output is written before the status is computed so it is never
        suppressed on failure.

        Returns:
            int: Wrapper exit status.
        """

        result = self.invoker(self.command(), self.config.root)
        self.last_result = result
        if result.output:
            forward_output(result.output, self.stream if self.stream is not None else sys.stdout)
        return result.exit_status


__all__ = [
    "Invoker",
    "LintRunner",
    "OutputStream",
    "build_command",
    "classify",
    "exit_status_for",
    "forward_output",
    "invoke",
    "toml_string",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Result types describing one linter invocation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .constants import EXIT_FAILURE, EXIT_SUCCESS, TOOL_STATUS_CLEAN, TOOL_STATUS_VIOLATIONS


class LintOutcome(StrEnum):
    """Classification of a linter exit status."""

    CLEAN = "clean"
    VIOLATIONS = "violations"
    ABNORMAL = "abnormal"

    @classmethod
    def from_returncode(cls, returncode: int) -> LintOutcome:
        """Return the outcome matching ``returncode``.

        Args:
            returncode: Exit status reported by the linter process.

        Returns:
            LintOutcome: ``CLEAN`` for 0, ``VIOLATIONS`` for 1, ``ABNORMAL`` otherwise.
        """

        if returncode == TOOL_STATUS_CLEAN:
            return cls.CLEAN
        if returncode == TOOL_STATUS_VIOLATIONS:
            return cls.VIOLATIONS
        return cls.ABNORMAL

    @property
    def exit_status(self) -> int:
        """Return the wrapper exit status reported to the hook caller."""

        return EXIT_SUCCESS if self is LintOutcome.CLEAN else EXIT_FAILURE


@dataclass(frozen=True, slots=True)
class InvocationResult:
    """Captured output and exit status of a single linter run.

    ``output`` holds the raw bytes the linter wrote to stdout and stderr, in
    the order they were written.
    """

    command: tuple[str, ...]
    output: bytes
    returncode: int

    @property
    def outcome(self) -> LintOutcome:
        """Return the :class:`LintOutcome` for ``returncode``.

        Returns:
            LintOutcome: Classification of the linter exit status.
        """

        return LintOutcome.from_returncode(self.returncode)

    @property
    def exit_status(self) -> int:
        """Return the wrapper exit status for this run.

        Returns:
            int: ``0`` for a clean run, ``2`` otherwise.
        """

        return self.outcome.exit_status


__all__ = ["InvocationResult", "LintOutcome"]

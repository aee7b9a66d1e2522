# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for linter status classification."""

from __future__ import annotations

import pytest

from lintgate.models import InvocationResult, LintOutcome


@pytest.mark.parametrize(
    ("returncode", "outcome", "exit_status"),
    [
        (0, LintOutcome.CLEAN, 0),
        (1, LintOutcome.VIOLATIONS, 2),
        (2, LintOutcome.ABNORMAL, 2),
        (127, LintOutcome.ABNORMAL, 2),
        (-9, LintOutcome.ABNORMAL, 2),
    ],
)
def test_outcome_mapping(returncode: int, outcome: LintOutcome, exit_status: int) -> None:
    result = InvocationResult(command=("ruff",), output=b"", returncode=returncode)

    assert result.outcome is outcome
    assert result.exit_status == exit_status


def test_invocation_result_is_frozen() -> None:
    result = InvocationResult(command=("ruff",), output=b"ok", returncode=0)

    with pytest.raises(AttributeError):
        result.returncode = 1  # type: ignore[misc]

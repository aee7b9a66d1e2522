# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across lintgate modules."""

from __future__ import annotations

from typing import Final

PROJECT_DIR_ENV: Final[str] = "CLAUDE_PROJECT_DIR"
TOOL_ENV: Final[str] = "LINTGATE_TOOL"
PATTERN_ENV: Final[str] = "LINTGATE_PATTERN"
EXTRA_ARGS_ENV: Final[str] = "LINTGATE_EXTRA_ARGS"
NO_FIX_ENV: Final[str] = "LINTGATE_NO_FIX"
NO_COLOR_ENV: Final[str] = "NO_COLOR"

DEFAULT_TOOL: Final[str] = "ruff"
DEFAULT_PATTERN: Final[str] = "*.py"

# Hook contract: anything other than a clean run blocks with status 2.
EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 2

# Linter statuses with a defined meaning; everything else is abnormal.
TOOL_STATUS_CLEAN: Final[int] = 0
TOOL_STATUS_VIOLATIONS: Final[int] = 1

# Shell conventions for a command that could not be launched.
STATUS_NOT_EXECUTABLE: Final[int] = 126
STATUS_NOT_FOUND: Final[int] = 127

TRUTHY_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and environment loading for the lint gate."""

from __future__ import annotations

import shlex
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    DEFAULT_PATTERN,
    DEFAULT_TOOL,
    EXTRA_ARGS_ENV,
    NO_FIX_ENV,
    PATTERN_ENV,
    PROJECT_DIR_ENV,
    TOOL_ENV,
    TRUTHY_VALUES,
)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LintGateConfig(BaseModel):
    """Resolved settings for a single lint gate invocation."""

    model_config = ConfigDict(validate_assignment=True, frozen=False)

    root: Path
    tool: str = DEFAULT_TOOL
    pattern: str = DEFAULT_PATTERN
    fix: bool = True
    extra_args: list[str] = Field(default_factory=list)

    @field_validator("tool", "pattern")
    @classmethod
    def _require_text(cls, value: str) -> str:
        """Strip ``value`` and reject blank strings.

        Args:
            value: Raw field value.

        Returns:
            str: Stripped value.
        """

        stripped = value.strip()
        if not stripped:
            msg = "value must not be blank"
            raise ValueError(msg)
        return stripped


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    """Return ``True`` when ``environ[name]`` holds a truthy value.

    Args:
        environ: Environment mapping.
        name: Variable name to read.

    Returns:
        bool: ``True`` for values such as ``1``, ``true`` or ``yes``.
    """

    return environ.get(name, "").strip().lower() in TRUTHY_VALUES


def _env_text(environ: Mapping[str, str], name: str, default: str) -> str:
    """Return the stripped value of ``environ[name]`` or ``default`` when blank.

    Args:
        environ: Environment mapping.
        name: Variable name to read.
        default: Value used when the variable is unset or blank.

    Returns:
        str: Resolved text value.
    """

    value = environ.get(name, "").strip()
    return value or default


def resolve_root(raw: str | Path | None) -> Path:
    """Return the absolute project root or raise :class:`ConfigError`.

    Args:
        raw: Root supplied by the caller or the environment.

    Returns:
        Path: Resolved directory that the linter should scan.
    """

    if raw is None or not str(raw).strip():
        raise ConfigError(f"Project root not set; export {PROJECT_DIR_ENV} or pass --root")
    root = Path(str(raw).strip()).expanduser().resolve()
    if not root.is_dir():
        raise ConfigError(f"Project root is not a directory: {root}")
    return root


def load_config(
    environ: Mapping[str, str],
    *,
    root: Path | None = None,
    tool: str | None = None,
    pattern: str | None = None,
    fix: bool | None = None,
) -> LintGateConfig:
    """Build a :class:`LintGateConfig` from ``environ`` and explicit overrides.

    Explicit keyword values win over the environment; the environment wins over
    built-in defaults.

    Args:
        environ: Process environment mapping (usually ``os.environ``).
        root: Optional project root overriding ``CLAUDE_PROJECT_DIR``.
        tool: Optional linter executable overriding ``LINTGATE_TOOL``.
        pattern: Optional include glob overriding ``LINTGATE_PATTERN``.
        fix: Optional auto-fix toggle overriding ``LINTGATE_NO_FIX``.

    Returns:
        LintGateConfig: Validated configuration.

    Raises:
        ConfigError: If the root is missing or invalid, or a value fails validation.
    """

    resolved_root = resolve_root(root if root is not None else environ.get(PROJECT_DIR_ENV))
    raw_extra = environ.get(EXTRA_ARGS_ENV, "")
    try:
        extra_args = shlex.split(raw_extra)
    except ValueError as exc:
        raise ConfigError(f"Could not parse {EXTRA_ARGS_ENV}: {exc}") from exc

    try:
        return LintGateConfig(
            root=resolved_root,
            tool=tool if tool is not None else _env_text(environ, TOOL_ENV, DEFAULT_TOOL),
            pattern=pattern if pattern is not None else _env_text(environ, PATTERN_ENV, DEFAULT_PATTERN),
            fix=fix if fix is not None else not _env_flag(environ, NO_FIX_ENV),
            extra_args=extra_args,
        )
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = ["ConfigError", "LintGateConfig", "load_config", "resolve_root"]

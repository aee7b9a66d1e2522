# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintgate.config import ConfigError, LintGateConfig, load_config
from lintgate.constants import DEFAULT_PATTERN, DEFAULT_TOOL


def test_load_config_reads_root_from_environment(tmp_path: Path) -> None:
    cfg = load_config({"CLAUDE_PROJECT_DIR": str(tmp_path)})

    assert cfg.root == tmp_path.resolve()
    assert cfg.tool == DEFAULT_TOOL
    assert cfg.pattern == DEFAULT_PATTERN
    assert cfg.fix is True
    assert cfg.extra_args == []


def test_load_config_missing_root_raises() -> None:
    with pytest.raises(ConfigError, match="CLAUDE_PROJECT_DIR"):
        load_config({})


def test_load_config_blank_root_raises() -> None:
    with pytest.raises(ConfigError):
        load_config({"CLAUDE_PROJECT_DIR": "   "})


def test_load_config_rejects_file_root(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("", encoding="utf-8")

    with pytest.raises(ConfigError, match="not a directory"):
        load_config({"CLAUDE_PROJECT_DIR": str(target)})


def test_environment_overrides_defaults(tmp_path: Path) -> None:
    env = {
        "CLAUDE_PROJECT_DIR": str(tmp_path),
        "LINTGATE_TOOL": "mylint",
        "LINTGATE_PATTERN": "*.pyi",
        "LINTGATE_EXTRA_ARGS": "--select E,F --quiet",
        "LINTGATE_NO_FIX": "yes",
    }

    cfg = load_config(env)

    assert cfg.tool == "mylint"
    assert cfg.pattern == "*.pyi"
    assert cfg.extra_args == ["--select", "E,F", "--quiet"]
    assert cfg.fix is False


def test_explicit_values_override_environment(tmp_path: Path) -> None:
    other = tmp_path / "other"
    other.mkdir()
    env = {"CLAUDE_PROJECT_DIR": str(tmp_path), "LINTGATE_TOOL": "mylint", "LINTGATE_NO_FIX": "1"}

    cfg = load_config(env, root=other, tool="ruff", pattern="src/*.py", fix=True)

    assert cfg.root == other.resolve()
    assert cfg.tool == "ruff"
    assert cfg.pattern == "src/*.py"
    assert cfg.fix is True


def test_unbalanced_extra_args_raise(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="LINTGATE_EXTRA_ARGS"):
        load_config({"CLAUDE_PROJECT_DIR": str(tmp_path), "LINTGATE_EXTRA_ARGS": "--select 'E"})


def test_blank_tool_override_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config({"CLAUDE_PROJECT_DIR": str(tmp_path)}, tool="  ")


def test_assignment_is_validated(tmp_path: Path) -> None:
    cfg = LintGateConfig(root=tmp_path)

    with pytest.raises(ValueError):
        cfg.pattern = ""

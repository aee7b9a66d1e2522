# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the lintgate command-line interface."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from lintgate.cli.app import app
from lintgate.cli.run import execute_run
from lintgate.cli.shared import CLIError, build_cli_logger
from lintgate.config import LintGateConfig


def test_run_clean_project_exits_zero(
    project_root: Path,
    fake_linter: Callable[[int, str], list[list[str]]],
) -> None:
    calls = fake_linter(0, "All checks passed.\n")

    result = CliRunner().invoke(app, ["run"])

    assert result.exit_code == 0
    assert "All checks passed." in result.output
    assert calls[0][-1] == str(project_root.resolve())


def test_run_remaining_violations_exit_two(
    project_root: Path,
    fake_linter: Callable[[int, str], list[list[str]]],
) -> None:
    fake_linter(1, "3 errors remain.\n")

    result = CliRunner().invoke(app, ["run"])

    assert result.exit_code == 2
    assert "3 errors remain." in result.output


def test_run_missing_tool_exits_two(project_root: Path) -> None:
    result = CliRunner().invoke(app, ["run", "--tool", "lintgate-definitely-missing-tool"])

    assert result.exit_code == 2
    assert "lintgate-definitely-missing-tool" in result.output


def test_run_without_root_exits_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLAUDE_PROJECT_DIR", raising=False)

    result = CliRunner().invoke(app, ["run", "--no-emoji"])

    assert result.exit_code == 2
    assert "CLAUDE_PROJECT_DIR" in result.output


def test_run_options_override_environment(
    project_root: Path,
    tmp_path: Path,
    fake_linter: Callable[[int, str], list[list[str]]],
) -> None:
    other = tmp_path / "other"
    other.mkdir()
    calls = fake_linter(0, "")

    result = CliRunner().invoke(
        app,
        ["run", "--root", str(other), "--tool", "mylint", "--pattern", "*.pyi", "--no-fix"],
    )

    assert result.exit_code == 0
    command = calls[0]
    assert command[:2] == ["mylint", "check"]
    assert "--fix" not in command
    assert 'include = ["*.pyi"]' in command
    assert command[-1] == str(other.resolve())


def test_verbose_diagnostics_go_to_stderr(
    project_root: Path,
    fake_linter: Callable[[int, str], list[list[str]]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    fake_linter(1, "E501 line too long\n")
    logger = build_cli_logger(emoji=False, debug=True, no_color=True)

    status = execute_run(LintGateConfig(root=project_root), logger=logger)

    captured = capsys.readouterr()
    assert status == 2
    assert captured.out == "E501 line too long\n"
    assert "outcome=violations" in captured.err
    assert "returncode=1" in captured.err
    assert "left violations" in captured.err


def test_cli_error_defaults_to_failure_status() -> None:
    assert CLIError("broken").exit_code == 2


def test_version_option() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("lintgate ")

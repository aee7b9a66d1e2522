# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared pytest fixtures."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from lintgate.constants import PROJECT_DIR_ENV

@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a project directory exported through the hook environment variable."""

    root = tmp_path / "project"
    root.mkdir()
    (root / "module.py").write_text("x = 1\n", encoding="utf-8")
    monkeypatch.setenv(PROJECT_DIR_ENV, str(root))
    for name in ("LINTGATE_TOOL", "LINTGATE_PATTERN", "LINTGATE_EXTRA_ARGS", "LINTGATE_NO_FIX"):
        monkeypatch.delenv(name, raising=False)
    return root


@pytest.fixture
def fake_linter(monkeypatch: pytest.MonkeyPatch) -> Callable[[int, str | bytes], list[list[str]]]:
    """Patch the subprocess layer so the linter reports ``returncode`` and ``output``.

    Returns a factory; the list it returns records every command executed.
    """

    def _install(returncode: int, output: str | bytes) -> list[list[str]]:
        calls: list[list[str]] = []
        payload = output.encode() if isinstance(output, str) else output

        def _run(args: Sequence[str], *, cwd: Path | None = None, env=None) -> subprocess.CompletedProcess[bytes]:
            calls.append(list(args))
            return subprocess.CompletedProcess(list(args), returncode, stdout=payload, stderr=None)

        monkeypatch.setattr("lintgate.runner.run_combined", _run)
        return calls

    return _install

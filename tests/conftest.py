# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from hooksetup.core.process import SubprocessExecutionError

HOOKSETUP_ENV_VARS = (
    "HOOKSETUP_TOOL",
    "HOOKSETUP_PACKAGE",
    "HOOKSETUP_INSTALLER",
    "HOOKSETUP_HOOK_TYPES",
    "HOOKSETUP_EMOJI",
)


class RecordingRunner:
    """Fail-fast runner double that records commands instead of executing them."""

    def __init__(self, failures: dict[str, int] | None = None) -> None:
        self.calls: list[tuple[str, ...]] = []
        self._failures = failures or {}

    def __call__(self, args: Sequence[str]) -> CompletedProcess[str]:
        command = tuple(args)
        self.calls.append(command)
        for needle, returncode in self._failures.items():
            if needle in command:
                raise SubprocessExecutionError(command, returncode, None, "boom")
        return CompletedProcess(args=list(command), returncode=0, stdout="", stderr="")


@pytest.fixture(autouse=True)
def _clean_hooksetup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in HOOKSETUP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Return an empty git-like repository root."""
    root = tmp_path / "repo"
    (root / ".git" / "hooks").mkdir(parents=True)
    return root


@pytest.fixture
def make_runner() -> Callable[..., RecordingRunner]:
    """Return a factory for runners that fail when a command contains a given token."""
    return RecordingRunner


@pytest.fixture
def write_executable() -> Callable[[Path, str], Path]:
    """Return a helper that writes an executable script."""

    def _write(path: Path, body: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        path.chmod(0o755)
        return path

    return _write

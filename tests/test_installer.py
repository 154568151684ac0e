# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Unit tests for package installer selection."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from hooksetup.config import HookSetupConfig, InstallerKind
from hooksetup.core.process import SubprocessExecutionError
from hooksetup.installer import install_tool, installer_command


def test_pip_installer_matches_plain_pip_install(tmp_path: Path) -> None:
    command = installer_command(InstallerKind.PIP, "pre-commit", root=tmp_path)

    assert command == ["pip", "install", "pre-commit"]


def test_uv_installer(tmp_path: Path) -> None:
    command = installer_command(InstallerKind.UV, "pre-commit==4.0.1", root=tmp_path)

    assert command == ["uv", "pip", "install", "pre-commit==4.0.1"]


@pytest.mark.skipif(os.name == "nt", reason="POSIX executables only")
def test_auto_prefers_virtualenv_pip(tmp_path: Path, write_executable) -> None:
    venv_pip = write_executable(tmp_path / ".venv" / "bin" / "pip", "#!/bin/sh\n")
    write_executable(tmp_path / "bin" / "uv", "#!/bin/sh\n")

    command = installer_command(
        InstallerKind.AUTO,
        "pre-commit",
        root=tmp_path,
        env={"PATH": str(tmp_path / "bin")},
    )

    assert command == [str(venv_pip.resolve()), "install", "pre-commit"]


@pytest.mark.skipif(os.name == "nt", reason="POSIX executables only")
def test_auto_falls_back_to_uv_then_pip(tmp_path: Path, write_executable) -> None:
    bin_dir = tmp_path / "bin"
    pip3 = write_executable(bin_dir / "pip3", "#!/bin/sh\n")

    command = installer_command(InstallerKind.AUTO, "pre-commit", root=tmp_path, env={"PATH": str(bin_dir)})
    assert command == [str(pip3), "install", "pre-commit"]

    uv = write_executable(bin_dir / "uv", "#!/bin/sh\n")
    command = installer_command(InstallerKind.AUTO, "pre-commit", root=tmp_path, env={"PATH": str(bin_dir)})
    assert command == [str(uv), "pip", "install", "pre-commit"]


def test_auto_without_any_installer(tmp_path: Path) -> None:
    (tmp_path / "bin").mkdir()

    with pytest.raises(FileNotFoundError, match="No package installer found"):
        installer_command(InstallerKind.AUTO, "pre-commit", root=tmp_path, env={"PATH": str(tmp_path / "bin")})


def test_install_tool_runs_installer_once(tmp_path: Path, make_runner) -> None:
    runner = make_runner()
    config = HookSetupConfig(package="pre-commit>=3")

    outcome = install_tool(config, root=tmp_path, runner=runner)

    assert runner.calls == [("pip", "install", "pre-commit>=3")]
    assert outcome.command == ("pip", "install", "pre-commit>=3")
    assert outcome.installer is InstallerKind.PIP


def test_install_tool_propagates_failure(tmp_path: Path, make_runner) -> None:
    runner = make_runner({"install": 2})

    with pytest.raises(SubprocessExecutionError) as excinfo:
        install_tool(HookSetupConfig(), root=tmp_path, runner=runner)

    assert excinfo.value.returncode == 2
    assert len(runner.calls) == 1

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration loading and precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from hooksetup.config import ConfigError, HookSetupConfig, InstallerKind, load_config


def _write_pyproject(root: Path, body: str) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults_without_pyproject(tmp_path: Path) -> None:
    config = load_config(tmp_path, env={})

    assert config == HookSetupConfig()
    assert config.tool == "pre-commit"
    assert config.package == "pre-commit"
    assert config.installer is InstallerKind.PIP
    assert config.hook_types == ()
    assert config.emoji is True


def test_pyproject_section_is_applied(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        """
[project]
name = "demo"

[tool.hooksetup]
installer = "uv"
hook-types = ["pre-commit", "pre-push", "pre-push"]
install-hook-envs = true
""",
    )

    config = load_config(tmp_path, env={})

    assert config.installer is InstallerKind.UV
    assert config.hook_types == ("pre-commit", "pre-push")
    assert config.install_hook_envs is True


def test_environment_overrides_pyproject(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[tool.hooksetup]\ninstaller = "uv"\n')

    config = load_config(
        tmp_path,
        env={
            "HOOKSETUP_INSTALLER": "auto",
            "HOOKSETUP_HOOK_TYPES": "pre-commit, commit-msg",
            "HOOKSETUP_EMOJI": "no",
        },
    )

    assert config.installer is InstallerKind.AUTO
    assert config.hook_types == ("pre-commit", "commit-msg")
    assert config.emoji is False


def test_explicit_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    config = load_config(
        tmp_path,
        env={"HOOKSETUP_EMOJI": "0", "HOOKSETUP_TOOL": "prek"},
        overrides={"emoji": True, "tool": None},
    )

    assert config.emoji is True
    assert config.tool == "prek"


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[tool.hooksetup]\nretries = 3\n')

    with pytest.raises(ConfigError, match="retries"):
        load_config(tmp_path, env={})


def test_invalid_installer_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="installer"):
        load_config(tmp_path, env={"HOOKSETUP_INSTALLER": "conda"})


def test_invalid_boolean_env(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="HOOKSETUP_EMOJI"):
        load_config(tmp_path, env={"HOOKSETUP_EMOJI": "maybe"})


def test_malformed_toml(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, "[tool.hooksetup\n")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path, env={})


def test_section_must_be_table(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[tool]\nhooksetup = "pip"\n')

    with pytest.raises(ConfigError, match="must be a table"):
        load_config(tmp_path, env={})

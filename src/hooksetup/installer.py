# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install the hook manager package with the configured installer."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .config import HookSetupConfig, InstallerKind
from .core.process import Runner
from .discovery import find_venv_bin, search_path

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstallOutcome:
    """Record of the installer invocation performed for the hook manager."""

    command: tuple[str, ...]
    installer: InstallerKind


def installer_command(
    kind: InstallerKind,
    package: str,
    *,
    root: Path,
    env: Mapping[str, str] | None = None,
) -> list[str]:
    """Return the command that installs ``package`` using ``kind``.

    ``auto`` resolves in order: the project's virtualenv ``pip``, ``uv pip
    install``, then the system ``pip3`` or ``pip``.

    Args:
        kind: Installer selection.
        package: Package specifier to install.
        root: Project root used to discover a virtualenv.
        env: Environment providing ``PATH`` for ``auto`` resolution.

    Returns:
        list[str]: Command arguments ready for a runner.

    Raises:
        FileNotFoundError: Raised for ``auto`` when no installer is available.
    """

    if kind is InstallerKind.PIP:
        return ["pip", "install", package]
    if kind is InstallerKind.UV:
        return ["uv", "pip", "install", package]

    venv_bin = find_venv_bin(root)
    if venv_bin is not None and (venv_bin / "pip").exists():
        return [str(venv_bin / "pip"), "install", package]

    path = search_path(root, env)
    uv_exe = shutil.which("uv", path=path)
    if uv_exe:
        return [uv_exe, "pip", "install", package]

    pip_exe = shutil.which("pip3", path=path) or shutil.which("pip", path=path)
    if pip_exe:
        return [pip_exe, "install", package]

    raise FileNotFoundError("No package installer found (tried virtualenv pip, uv, pip3, pip)")


def install_tool(
    config: HookSetupConfig,
    *,
    root: Path,
    runner: Runner,
    env: Mapping[str, str] | None = None,
) -> InstallOutcome:
    """Install ``config.package`` exactly once.

    Args:
        config: Effective configuration naming the package and installer.
        root: Project root used to discover a virtualenv.
        runner: Fail-fast command runner.
        env: Environment providing ``PATH`` for installer resolution.

    Returns:
        InstallOutcome: The command that was executed.

    Raises:
        SubprocessExecutionError: Raised by ``runner`` when the installer fails.
        FileNotFoundError: Raised when the installer executable is missing.
    """

    command = installer_command(config.installer, config.package, root=root, env=env)
    LOGGER.debug("installing package=%s installer=%s", config.package, config.installer.value)
    runner(command)
    return InstallOutcome(command=tuple(command), installer=config.installer)


__all__ = ["InstallOutcome", "install_tool", "installer_command"]

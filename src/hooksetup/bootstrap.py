# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end hook setup: probe, install when missing, register hooks."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .config import HookSetupConfig
from .core.logging import blank, info, ok, warn
from .core.process import Runner, build_runner
from .discovery import locate_executable, search_path
from .hooks import register_hooks
from .installer import install_tool


@dataclass(frozen=True, slots=True)
class SetupResult:
    """Summary of a completed hook setup run."""

    executable: Path | None
    installed_tool: bool
    install_command: tuple[str, ...] | None
    hook_command: tuple[str, ...]


def setup_hooks(
    root: Path,
    config: HookSetupConfig,
    *,
    runner: Runner | None = None,
    env: Mapping[str, str] | None = None,
) -> SetupResult:
    """Install the hook manager when missing and register its git hooks.

    Any failing command propagates before the success banner is printed.

    Args:
        root: Repository root in which hooks are registered.
        config: Effective configuration.
        runner: Optional command runner; defaults to a fail-fast runner in ``root``.
        env: Environment used for probing and commands; defaults to ``os.environ``.

    Returns:
        SetupResult: What was probed, installed, and executed.

    Raises:
        SubprocessExecutionError: Raised when the installer or registration fails.
        FileNotFoundError: Raised when a required executable cannot be found.
    """

    project_root = root.resolve()
    environ = dict(os.environ if env is None else env)
    environ["PATH"] = search_path(project_root, environ)
    run = runner or build_runner(cwd=project_root, env=environ)
    tool = config.tool
    use_emoji = config.emoji

    info(f"Setting up {tool} hooks...", use_emoji=False)

    executable = locate_executable(tool, root=project_root, env=environ)
    install_command: tuple[str, ...] | None = None
    if executable is None:
        info(f"{tool} is not installed. Installing...", use_emoji=False)
        outcome = install_tool(config, root=project_root, runner=run, env=environ)
        install_command = outcome.command
        executable = locate_executable(tool, root=project_root, env=environ)
        if executable is None:
            warn(f"{tool} was installed but is not on the search path", use_emoji=use_emoji)

    info(f"Installing {tool} hooks...", use_emoji=False)
    hook_command = register_hooks(executable or tool, config, runner=run)

    ok(f"{tool[:1].upper()}{tool[1:]} hooks installed successfully!", use_emoji=use_emoji)
    blank()
    info("Hooks will run automatically on git commit.", use_emoji=False)
    info(f"To run manually: {tool} run --all-files", use_emoji=False)

    return SetupResult(
        executable=executable,
        installed_tool=install_command is not None,
        install_command=install_command,
        hook_command=hook_command,
    )


__all__ = ["SetupResult", "setup_hooks"]

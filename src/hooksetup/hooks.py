# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Register git hooks through the hook manager's own ``install`` subcommand."""

from __future__ import annotations

from pathlib import Path

from .config import HookSetupConfig
from .core.process import Runner


def registration_command(executable: Path | str, config: HookSetupConfig) -> list[str]:
    """Return the hook-registration command for ``executable``.

    Args:
        executable: Resolved hook manager path, or its bare name.
        config: Effective configuration providing hook types and flags.

    Returns:
        list[str]: ``<tool> install`` plus any ``--hook-type`` and
        ``--install-hooks`` arguments.
    """

    command = [str(executable), "install"]
    for hook_type in config.hook_types:
        command.extend(["--hook-type", hook_type])
    if config.install_hook_envs:
        command.append("--install-hooks")
    return command


def register_hooks(executable: Path | str, config: HookSetupConfig, *, runner: Runner) -> tuple[str, ...]:
    """Run the hook manager's ``install`` subcommand.

    Args:
        executable: Resolved hook manager path, or its bare name.
        config: Effective configuration.
        runner: Fail-fast command runner bound to the repository root.

    Returns:
        tuple[str, ...]: The command that was executed.

    Raises:
        SubprocessExecutionError: Raised by ``runner`` when registration fails.
    """

    command = registration_command(executable, config)
    runner(command)
    return tuple(command)


__all__ = ["register_hooks", "registration_command"]

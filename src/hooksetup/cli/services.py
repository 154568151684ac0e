# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helper services used by the hooksetup CLI command."""

from __future__ import annotations

from ..config import ConfigError, HookSetupConfig, load_config
from ..core.process import SubprocessExecutionError
from ..bootstrap import SetupResult, setup_hooks
from .models import SetupCLIOptions
from .shared import EXIT_COMMAND_NOT_FOUND, EXIT_CONFIG_ERROR, CLIError


def resolve_config(options: SetupCLIOptions) -> HookSetupConfig:
    """Load configuration for the provided options.

    Raises:
        CLIError: Raised when configuration is invalid.
    """

    try:
        return load_config(options.root, overrides=options.config_overrides())
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=EXIT_CONFIG_ERROR) from exc


def exit_status(returncode: int) -> int:
    """Return the shell-style exit status for a child ``returncode``.

    Signal terminations (negative codes) map to ``128 + signal`` as ``sh`` reports them.
    """

    if returncode < 0:
        return 128 - returncode
    return returncode or 1


def perform_setup(options: SetupCLIOptions, config: HookSetupConfig) -> SetupResult:
    """Run the hook setup for the provided options.

    Args:
        options: Normalised CLI options.
        config: Effective configuration.

    Returns:
        SetupResult: The result reported by :func:`setup_hooks`.

    Raises:
        CLIError: Raised when an external command fails or cannot be found.
    """

    try:
        return setup_hooks(options.root, config)
    except SubprocessExecutionError as exc:
        raise CLIError(str(exc), exit_code=exit_status(exc.returncode), report=False) from exc
    except FileNotFoundError as exc:
        raise CLIError(str(exc), exit_code=EXIT_COMMAND_NOT_FOUND) from exc


__all__ = ["exit_status", "perform_setup", "resolve_config"]

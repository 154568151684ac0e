# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI error types and exit codes."""

from __future__ import annotations

from typing import Final

EXIT_CONFIG_ERROR: Final[int] = 2
EXIT_COMMAND_NOT_FOUND: Final[int] = 127


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1, report: bool = True) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
            report: ``False`` when the failing tool already printed its own diagnostics.
        """

        super().__init__(message)
        self.exit_code = exit_code
        self.report = report


__all__ = ["CLIError", "EXIT_COMMAND_NOT_FOUND", "EXIT_CONFIG_ERROR"]

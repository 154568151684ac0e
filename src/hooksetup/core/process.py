# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; arguments are passed as a list and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

LOGGER = logging.getLogger(__name__)

TIMEOUT_RETURNCODE: Final[int] = 124

Runner = Callable[[Sequence[str]], CompletedProcess[str]]


@dataclass(slots=True)
class CommandOptions:
    """Command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = True
    capture_output: bool = False
    text: bool = True
    timeout: float | None = None


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stdout: Captured standard output stream.
            stderr: Captured standard error stream.
        """
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def _normalize_args(args: Sequence[str], env: Mapping[str, str] | None) -> list[str]:
    """Normalise the subprocess argument sequence.

    Args:
        args: Raw command arguments supplied by the caller.
        env: Environment whose ``PATH`` is used to resolve bare executable names.

    Returns:
        list[str]: Validated argument list suitable for subprocess execution.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    search = env.get("PATH") if env is not None else None
    resolved = shutil.which(head, path=search)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    Output streams straight to the terminal unless ``capture_output`` is set, so
    a failing tool's own diagnostics reach the user unchanged.

    Args:
        args: Command and argument sequence to execute.
        options: Options configuring execution semantics.

    Returns:
        CompletedProcess: Subprocess execution metadata.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        SubprocessExecutionError: When ``check`` is true and the process exits
            with a non-zero status.
    """

    resolved_options = options or CommandOptions()
    normalized = _normalize_args(args, resolved_options.env)
    LOGGER.debug("running command=%s cwd=%s", " ".join(normalized), resolved_options.cwd)

    try:
        # Bandit: argument lists are passed directly without shell expansion.
        completed: CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
            env=dict(resolved_options.env) if resolved_options.env is not None else None,
            check=False,
            capture_output=resolved_options.capture_output,
            text=resolved_options.text,
            timeout=resolved_options.timeout,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = _ensure_text(exc.stdout) or ""
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {resolved_options.timeout:.1f}s"
        combined_stderr = f"{stderr}\n{timeout_msg}" if stderr else timeout_msg
        completed = subprocess.CompletedProcess(
            args=list(normalized),
            returncode=TIMEOUT_RETURNCODE,
            stdout=stdout,
            stderr=combined_stderr,
        )

    LOGGER.debug("finished command=%s returncode=%s", normalized[0], completed.returncode)
    if resolved_options.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


def build_runner(*, cwd: Path | None = None, env: Mapping[str, str] | None = None) -> Runner:
    """Return a fail-fast runner bound to ``cwd`` and ``env``.

    Args:
        cwd: Working directory used for every command.
        env: Environment passed to every command.

    Returns:
        Runner: Callable executing a command and raising on non-zero exit.
    """

    options = CommandOptions(cwd=cwd, env=env, check=True)

    def _run(args: Sequence[str]) -> CompletedProcess[str]:
        return run_command(args, options=options)

    return _run


__all__ = [
    "CommandOptions",
    "Runner",
    "SubprocessExecutionError",
    "TIMEOUT_RETURNCODE",
    "build_runner",
    "run_command",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install a commit-hook manager and register its git hooks."""

from __future__ import annotations

from importlib import metadata

from .config import ConfigError, HookSetupConfig, InstallerKind, load_config
from .core.process import SubprocessExecutionError
from .bootstrap import SetupResult, setup_hooks

try:
    __version__ = metadata.version("hooksetup")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "ConfigError",
    "HookSetupConfig",
    "InstallerKind",
    "SetupResult",
    "SubprocessExecutionError",
    "load_config",
    "setup_hooks",
    "__version__",
]

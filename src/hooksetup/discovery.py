# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate executables on the search path, preferring the project virtualenv."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Final

LOGGER = logging.getLogger(__name__)

WINDOWS_OS_NAME: Final[str] = "nt"
VENV_DIR_NAMES: Final[tuple[str, ...]] = (".venv", "venv")


def find_venv_bin(root: Path | None = None) -> Path | None:
    """Find the virtualenv bin/Scripts directory relative to *root*.

    The search walks up from ``root`` until the filesystem root, looking for
    either ``.venv`` or ``venv`` directories.
    """
    root = (root or Path.cwd()).resolve()
    for candidate in (root, *root.parents):
        for name in VENV_DIR_NAMES:
            venv_dir = candidate / name
            if not venv_dir.is_dir():
                continue
            bin_dir = venv_dir / ("Scripts" if os.name == WINDOWS_OS_NAME else "bin")
            if bin_dir.is_dir():
                return bin_dir
    return None


def search_path(root: Path, env: Mapping[str, str] | None = None) -> str:
    """Return the ``PATH`` string consulted when resolving bare command names.

    Args:
        root: Project root used to discover a virtualenv.
        env: Environment providing ``PATH``; defaults to ``os.environ``.

    Returns:
        str: The virtualenv bin directory (when present) followed by ``PATH``.
    """

    environ = os.environ if env is None else env
    entries = [entry for entry in environ.get("PATH", "").split(os.pathsep) if entry]
    venv_bin = find_venv_bin(root)
    if venv_bin is not None and str(venv_bin) not in entries:
        entries.insert(0, str(venv_bin))
    return os.pathsep.join(entries)


def locate_executable(
    name: str,
    *,
    root: Path,
    env: Mapping[str, str] | None = None,
) -> Path | None:
    """Return the absolute path of ``name`` or ``None`` when it is not installed.

    Args:
        name: Bare command name such as ``pre-commit``.
        root: Project root used to discover a virtualenv.
        env: Environment providing ``PATH``; defaults to ``os.environ``.

    Returns:
        Path | None: Resolved executable path when found.
    """

    resolved = shutil.which(name, path=search_path(root, env))
    LOGGER.debug("probe executable=%s resolved=%s", name, resolved)
    return Path(resolved) if resolved else None


__all__ = ["find_venv_bin", "locate_executable", "search_path"]

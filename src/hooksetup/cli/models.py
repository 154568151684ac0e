# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures for the hooksetup CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Repository root in which hooks are registered. Defaults to the current directory.",
        show_default=False,
    ),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output.", show_default=False),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Log executed commands to stderr."),
]


@dataclass(slots=True)
class SetupCLIOptions:
    """Normalised CLI inputs for the setup command."""

    root: Path
    emoji: bool | None
    debug: bool

    @classmethod
    def from_cli(cls, root: Path | None, *, emoji: bool | None, debug: bool) -> SetupCLIOptions:
        """Return options parsed from CLI arguments."""

        return cls(root=(root or Path.cwd()).resolve(), emoji=emoji, debug=debug)

    def config_overrides(self) -> dict[str, Any]:
        """Return configuration overrides supplied on the command line."""

        return {"emoji": self.emoji}


__all__ = [
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "ROOT_OPTION",
    "SetupCLIOptions",
]

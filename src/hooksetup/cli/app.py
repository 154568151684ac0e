# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from ..core.logging import configure_debug_logging, fail
from .models import DEBUG_OPTION, EMOJI_OPTION, ROOT_OPTION, SetupCLIOptions
from .services import perform_setup, resolve_config
from .shared import CLIError

app = typer.Typer(
    name="hooksetup",
    help="Install pre-commit (when missing) and register its git hooks.",
    add_completion=False,
    no_args_is_help=False,
)


@app.command()
def main(
    root: ROOT_OPTION = None,
    emoji: EMOJI_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Install the hook manager when it is missing, then register its git hooks.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = SetupCLIOptions.from_cli(root, emoji=emoji, debug=debug)
    configure_debug_logging(enabled=options.debug)
    use_emoji = True if options.emoji is None else options.emoji
    try:
        config = resolve_config(options)
        use_emoji = config.emoji
        perform_setup(options, config)
    except CLIError as exc:
        if exc.report:
            fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=0)


__all__ = ["app", "main"]

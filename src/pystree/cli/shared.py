# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (errors, typed parameters)."""

from __future__ import annotations

from typing import Annotated

import typer


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1, show_help: bool = False) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
            show_help: Whether the help text should follow the message.
        """

        super().__init__(message)
        self.exit_code = exit_code
        self.show_help = show_help


class UsageError(CLIError):
    """Raised when the invocation itself is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=1, show_help=True)


PATTERNS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(metavar="FILE...", help="Glob patterns of files to process.", show_default=False),
]
PLUGINS_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--plugins",
        metavar="PLUGINS",
        help="A comma-separated list of plugins to load (repeatable).",
        show_default=False,
    ),
]
PRINT_WIDTH_OPTION = Annotated[
    int,
    typer.Option("--print-width", metavar="NUMBER", help="The maximum line width to use when formatting."),
]

__all__ = [
    "CLIError",
    "PATTERNS_ARGUMENT",
    "PLUGINS_OPTION",
    "PRINT_WIDTH_OPTION",
    "UsageError",
]

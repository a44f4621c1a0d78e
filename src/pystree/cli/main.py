# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process entry point: command lookup, config merge and exit status."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping, Sequence
from functools import cache
from types import MappingProxyType
from typing import Final

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from typer.core import TyperGroup

from ..config.sources import ConfigFile, merge_arguments
from ..constants import PROG_NAME
from ..errors import ConfigError, StartupError
from ..logging import fail
from ..reporting.output import OutputStreams
from ..runtime.environment import RuntimeEnvironment
from .app import app
from .help import render_help
from .shared import CLIError

DEBUG_ENV: Final[str] = "PYSTREE_DEBUG"

COMMAND_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "a": "ast",
        "c": "check",
        "f": "format",
        "j": "json",
        "m": "match",
        "w": "write",
    },
)


def _dispatch_error_types() -> tuple[type[Exception], ...]:
    """Return the click error base classes raised while parsing arguments.

    Recent typer releases bundle their own copy of click, whose exceptions do
    not derive from the installed ``click`` package. ``typer.BadParameter``
    always comes from the copy typer dispatches through.
    """

    bundled = next(base for base in typer.BadParameter.__mro__ if base.__name__ == "ClickException")
    return tuple(dict.fromkeys((click.ClickException, bundled)))


CLICK_ERRORS: Final[tuple[type[Exception], ...]] = _dispatch_error_types()


@cache
def command_group() -> TyperGroup:
    """Return the Click group built from the Typer application."""

    return typer.main.get_group(app)


def resolve_command(name: str) -> str | None:
    """Return the canonical command for ``name`` or ``None`` when unknown.

    Args:
        name: First positional token, possibly a short alias.

    Returns:
        str | None: Canonical command name.
    """

    canonical = COMMAND_ALIASES.get(name, name)
    return canonical if canonical in command_group().commands else None


def _usage_error(output: OutputStreams, message: str | None = None) -> int:
    if message:
        output.failure(message)
    output.warn(render_help())
    return 1


def run(argv: Sequence[str], environment: RuntimeEnvironment | None = None) -> int:
    """Run the CLI over ``argv`` and return the exit status.

    The first token selects the command. Lines from the config file in the
    working directory are inserted ahead of the remaining arguments so that
    real command-line flags take precedence.

    Args:
        argv: Arguments following the program name.
        environment: Runtime context; defaults to the current process.

    Returns:
        int: ``0`` on success, ``1`` on item failures or usage errors.

    Raises:
        StartupError: If a plugin cannot be loaded.
    """

    environment = environment or RuntimeEnvironment.from_process()
    output = OutputStreams.from_environment(environment)
    if not argv:
        return _usage_error(output)

    name, *arguments = argv
    command_name = resolve_command(name)
    if command_name is None:
        return _usage_error(output)

    command = command_group().commands[command_name]
    merged = merge_arguments(ConfigFile(environment.cwd), arguments)
    try:
        result = command.main(
            args=merged,
            prog_name=f"{PROG_NAME} {command_name}",
            standalone_mode=False,
            obj=environment,
        )
    except CLICK_ERRORS as exc:
        return _usage_error(output, exc.format_message())
    except ConfigError as exc:
        return _usage_error(output, str(exc))
    except CLIError as exc:
        if exc.show_help:
            return _usage_error(output, str(exc))
        output.failure(str(exc))
        return exc.exit_code
    return int(result or 0)


def configure_logging() -> None:
    """Route developer diagnostics to stderr when ``PYSTREE_DEBUG`` is set."""

    if not os.environ.get(DEBUG_ENV):
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(threadName)s %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Console-script entry point.

    Args:
        argv: Optional explicit arguments; defaults to ``sys.argv[1:]``.
    """

    configure_logging()
    arguments = list(sys.argv[1:] if argv is None else argv)
    try:
        code = run(arguments)
    except StartupError as exc:
        fail(Console(stderr=True, markup=False, highlight=False), str(exc))
        code = 1
    raise SystemExit(code)


__all__ = ["CLICK_ERRORS", "COMMAND_ALIASES", "configure_logging", "main", "resolve_command", "run"]

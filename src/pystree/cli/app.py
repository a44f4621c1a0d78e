# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application defining every pystree command."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

import typer

from .. import __version__
from ..actions import (
    Action,
    AstAction,
    CheckAction,
    DebugAction,
    DocAction,
    FormatAction,
    JsonAction,
    MatchAction,
    WriteAction,
)
from ..config.models import Options
from ..constants import DEFAULT_PRINT_WIDTH, PROG_NAME
from ..discovery.resolver import resolve_work_items
from ..orchestration.pool import Dispatcher
from ..plugins import load_language_server, load_plugins
from ..reporting.output import OutputStreams
from ..runtime.environment import RuntimeEnvironment
from .help import render_help
from .shared import PATTERNS_ARGUMENT, PLUGINS_OPTION, PRINT_WIDTH_OPTION, UsageError

LOGGER = logging.getLogger(__name__)

# Zero-queue commands tolerate the flags and patterns a config file may add.
_LENIENT_CONTEXT: Final[dict[str, bool]] = {"ignore_unknown_options": True, "allow_extra_args": True}

app = typer.Typer(
    name=PROG_NAME,
    help="Inspect, verify and format source files.",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    rich_markup_mode=None,
)


def _environment(ctx: typer.Context) -> RuntimeEnvironment:
    if isinstance(ctx.obj, RuntimeEnvironment):
        return ctx.obj
    environment = RuntimeEnvironment.from_process()
    ctx.obj = environment
    return environment


def _prepare(
    environment: RuntimeEnvironment,
    *,
    plugins: Sequence[str] | None,
    print_width: int,
) -> Options:
    """Validate options and load the requested plugins.

    Args:
        environment: Runtime context whose handler registry plugins extend.
        plugins: Raw ``--plugins`` values.
        print_width: Final ``--print-width`` value.

    Returns:
        Options: Frozen options for the run.
    """

    options = Options.from_cli(print_width=print_width, plugins=plugins)
    load_plugins(options.plugins, environment.handlers)
    return options


def run_action(
    ctx: typer.Context,
    action_type: type[Action],
    patterns: Sequence[str] | None,
    *,
    plugins: Sequence[str] | None,
    print_width: int,
) -> int:
    """Resolve the work items and run ``action_type`` over them.

    Args:
        ctx: Typer context carrying the runtime environment.
        action_type: Action class selected by the command.
        patterns: Positional glob patterns.
        plugins: Raw ``--plugins`` values.
        print_width: Final ``--print-width`` value.

    Returns:
        int: ``1`` when any item failed, ``0`` otherwise.

    Raises:
        UsageError: If standard input is a terminal and no patterns were given.
    """

    environment = _environment(ctx)
    options = _prepare(environment, plugins=plugins, print_width=print_width)
    resolved_patterns = list(patterns or ())
    if environment.stdin_is_tty and not resolved_patterns:
        raise UsageError("No files given and standard input is a terminal.")

    items = resolve_work_items(resolved_patterns, environment)
    output = OutputStreams.from_environment(environment)
    action = action_type(options, output)
    LOGGER.debug("running %r over %d item(s)", action, len(items))
    dispatcher = Dispatcher(action=action, output=output, max_workers=environment.cpu_count)
    return dispatcher.dispatch(items).exit_code


@app.command("ast", help=AstAction.summary)
def ast_command(
    ctx: typer.Context,
    patterns: PATTERNS_ARGUMENT = None,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    return run_action(ctx, AstAction, patterns, plugins=plugins, print_width=print_width)


@app.command("check", help=CheckAction.summary)
def check_command(
    ctx: typer.Context,
    patterns: PATTERNS_ARGUMENT = None,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    return run_action(ctx, CheckAction, patterns, plugins=plugins, print_width=print_width)


@app.command("debug", help=DebugAction.summary)
def debug_command(
    ctx: typer.Context,
    patterns: PATTERNS_ARGUMENT = None,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    return run_action(ctx, DebugAction, patterns, plugins=plugins, print_width=print_width)


@app.command("doc", help=DocAction.summary)
def doc_command(
    ctx: typer.Context,
    patterns: PATTERNS_ARGUMENT = None,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    return run_action(ctx, DocAction, patterns, plugins=plugins, print_width=print_width)


@app.command("format", help=FormatAction.summary)
def format_command(
    ctx: typer.Context,
    patterns: PATTERNS_ARGUMENT = None,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    return run_action(ctx, FormatAction, patterns, plugins=plugins, print_width=print_width)


@app.command("json", help=JsonAction.summary)
def json_command(
    ctx: typer.Context,
    patterns: PATTERNS_ARGUMENT = None,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    return run_action(ctx, JsonAction, patterns, plugins=plugins, print_width=print_width)


@app.command("match", help=MatchAction.summary)
def match_command(
    ctx: typer.Context,
    patterns: PATTERNS_ARGUMENT = None,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    return run_action(ctx, MatchAction, patterns, plugins=plugins, print_width=print_width)


@app.command("write", help=WriteAction.summary)
def write_command(
    ctx: typer.Context,
    patterns: PATTERNS_ARGUMENT = None,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    return run_action(ctx, WriteAction, patterns, plugins=plugins, print_width=print_width)


@app.command("help", help="Display this help message", context_settings=_LENIENT_CONTEXT)
def help_command(ctx: typer.Context) -> int:
    OutputStreams.from_environment(_environment(ctx)).line(render_help())
    return 0


@app.command("version", help="Output the current version of pystree", context_settings=_LENIENT_CONTEXT)
def version_command(ctx: typer.Context) -> int:
    OutputStreams.from_environment(_environment(ctx)).emit(__version__)
    return 0


@app.command("lsp", help="Run pystree in language server mode", context_settings=_LENIENT_CONTEXT)
def lsp_command(
    ctx: typer.Context,
    plugins: PLUGINS_OPTION = None,
    print_width: PRINT_WIDTH_OPTION = DEFAULT_PRINT_WIDTH,
) -> int:
    """Hand control to an installed language server until it exits."""

    environment = _environment(ctx)
    options = _prepare(environment, plugins=plugins, print_width=print_width)
    server = load_language_server()
    if server is None:
        OutputStreams.from_environment(environment).failure(
            "No language server is installed; install a package providing the "
            "'pystree.language_server' entry point.",
        )
        return 1
    server(print_width=options.print_width, handlers=environment.handlers)
    return 0


__all__ = ["app", "run_action"]

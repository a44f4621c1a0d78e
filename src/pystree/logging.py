# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers rendered through Rich consoles."""

from __future__ import annotations

from typing import Final

from rich.console import Console
from rich.text import Text

BOLD: Final[str] = "bold"
GRAY: Final[str] = "color(102)"
RED: Final[str] = "bold red"
YELLOW: Final[str] = "yellow"


def bold(value: str) -> Text:
    """Return ``value`` styled in bold."""

    return Text(value, style=BOLD)


def gray(value: str) -> Text:
    """Return ``value`` styled in a muted gray."""

    return Text(value, style=GRAY)


def red(value: str) -> Text:
    """Return ``value`` styled in bold red."""

    return Text(value, style=RED)


def yellow(value: str) -> Text:
    """Return ``value`` styled in yellow."""

    return Text(value, style=YELLOW)


def _print_line(console: Console, msg: str | Text, *, style: str | None) -> None:
    """Render ``msg`` to ``console`` as a single styled line.

    Args:
        console: Destination console.
        msg: Message text to print.
        style: Rich style name applied to the whole line.
    """

    text = msg.copy() if isinstance(msg, Text) else Text(msg)
    if style:
        text.stylize(style)
    console.print(text)


def info(console: Console, msg: str | Text) -> None:
    """Emit an informational message.

    Args:
        console: Destination console.
        msg: Message text to display.
    """

    _print_line(console, msg, style=None)


def ok(console: Console, msg: str | Text) -> None:
    """Emit a success message.

    Args:
        console: Destination console.
        msg: Message text to display.
    """

    _print_line(console, msg, style="green")


def warn(console: Console, msg: str | Text) -> None:
    """Emit a warning message.

    Args:
        console: Destination console.
        msg: Message text to display.
    """

    _print_line(console, msg, style=None)


def fail(console: Console, msg: str | Text) -> None:
    """Emit an error message.

    Args:
        console: Destination console.
        msg: Message text to display.
    """

    _print_line(console, msg, style=RED)


def warn_label(filepath: str) -> Text:
    """Return the ``[warn] <filepath>`` line printed for a failing item."""

    return Text.assemble("[", yellow("warn"), "] ", filepath)


__all__ = [
    "bold",
    "fail",
    "gray",
    "info",
    "ok",
    "red",
    "warn",
    "warn_label",
    "yellow",
]

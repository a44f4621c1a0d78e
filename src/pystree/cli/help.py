# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Help text shown by ``pystree help`` and on usage errors."""

from __future__ import annotations

from typing import Final

from rich.text import Text

from ..actions import ACTIONS
from ..constants import PROG_NAME
from ..logging import bold

_FLAGS: Final[str] = "[--plugins=...] [--print-width=NUMBER]"

# (command, arguments, description) in display order.
_COMMANDS: Final[tuple[tuple[str, str, str], ...]] = (
    ("ast", f"{_FLAGS} FILE", ACTIONS["ast"].summary),
    ("check", f"{_FLAGS} FILE", ACTIONS["check"].summary),
    ("debug", f"{_FLAGS} FILE", ACTIONS["debug"].summary),
    ("doc", "[--plugins=...] FILE", ACTIONS["doc"].summary),
    ("format", f"{_FLAGS} FILE", ACTIONS["format"].summary),
    ("json", "[--plugins=...] FILE", ACTIONS["json"].summary),
    ("match", "[--plugins=...] FILE", ACTIONS["match"].summary),
    ("help", "", "Display this help message"),
    ("lsp", _FLAGS, "Run pystree in language server mode"),
    ("version", "", "Output the current version of pystree"),
    ("write", f"{_FLAGS} FILE", ACTIONS["write"].summary),
)

_OPTIONS: Final[tuple[tuple[str, str], ...]] = (
    ("--plugins=...", "A comma-separated list of plugins to load."),
    ("--print-width=NUMBER", "The maximum line width to use when formatting."),
)


def render_help() -> Text:
    """Return the full help message.

    Returns:
        Text: Multi-line help text with bold command synopses.
    """

    text = Text()
    for command, arguments, description in _COMMANDS:
        synopsis = " ".join(part for part in (PROG_NAME, command, arguments) if part)
        text.append_text(bold(synopsis))
        text.append(f"\n  {description}\n\n")
    for flag, description in _OPTIONS:
        text.append(f"{flag}\n  {description}\n\n")
    text.rstrip()
    return text


__all__ = ["render_help"]

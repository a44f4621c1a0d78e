# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across the pystree package."""

from __future__ import annotations

from typing import Final

PROG_NAME: Final[str] = "pystree"
DEFAULT_PRINT_WIDTH: Final[int] = 80
CONFIG_FILENAME: Final[str] = ".pystreerc"
STDIN_FILEPATH: Final[str] = "<stdin>"
DEFAULT_EXTENSION: Final[str] = ".py"

PLUGIN_ENTRY_POINT_GROUP: Final[str] = "pystree.plugins"
LANGUAGE_SERVER_ENTRY_POINT_GROUP: Final[str] = "pystree.language_server"

# Number of source lines shown on either side of a parse failure.
DIAGNOSTIC_CONTEXT_LINES: Final[int] = 3

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_EXTENSION",
    "DEFAULT_PRINT_WIDTH",
    "DIAGNOSTIC_CONTEXT_LINES",
    "LANGUAGE_SERVER_ENTRY_POINT_GROUP",
    "PLUGIN_ENTRY_POINT_GROUP",
    "PROG_NAME",
    "STDIN_FILEPATH",
]

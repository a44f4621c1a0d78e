# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Source excerpts for parse failures.

A parse failure is shown as a window of up to three lines on either side of
the offending line, each prefixed with its right-aligned line number::

      1 | def broken(:
    > 2 |     return 1
        |     ^
      3 |

The window is clipped at the start and end of the source; line indices
outside the source are never referenced.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from rich.text import Text

from ..constants import DIAGNOSTIC_CONTEXT_LINES
from ..errors import ParseError
from ..logging import gray, red

MARKER: Final[str] = ">"
CARET: Final[str] = "^"

# Tabs are expanded before printing so the caret and the line share columns.
TAB_SIZE: Final[int] = 4

LineColorizer = Callable[[str], Text]


def diagnostic_window(line: int, total_lines: int, *, context: int = DIAGNOSTIC_CONTEXT_LINES) -> range:
    """Return the 1-based line numbers displayed around ``line``.

    Args:
        line: 1-based line number of the failure.
        total_lines: Number of lines in the source.
        context: Lines shown on either side of ``line``.

    Returns:
        range: Line numbers from ``max(line - context, 1)`` to
        ``min(line + context, total_lines)`` inclusive; empty for empty sources.
    """

    first = max(line - context, 1)
    last = min(line + context, total_lines)
    return range(first, last + 1)


def _caret_padding(line: str, column: int) -> str:
    return " " * len(line[:column].expandtabs(TAB_SIZE))


def _plain(line: str) -> Text:
    return Text(line)


class DiagnosticRenderer:
    """Render parse failures as line-numbered, caret-annotated excerpts."""

    def __init__(self, colorize: LineColorizer | None = None) -> None:
        """Create a renderer.

        Args:
            colorize: Callable highlighting a single source line. Defaults to
                plain text.
        """

        self._colorize = colorize or _plain

    def render(self, error: ParseError, source: str) -> list[Text]:
        """Return the excerpt lines for ``error`` within ``source``.

        Args:
            error: Parse failure carrying a 1-based line and 0-based column.
            source: Full source text that failed to parse.

        Returns:
            list[Text]: Lines to print, in order.
        """

        lines = source.splitlines()
        window = diagnostic_window(error.line, len(lines))
        if not window:
            return []
        digits = len(str(window[-1]))

        rendered: list[Text] = []
        for line_number in window:
            line = lines[line_number - 1]
            content = self._colorize(line.expandtabs(TAB_SIZE))
            if line_number == error.line:
                rendered.append(
                    Text.assemble(red(MARKER), " ", gray(f"{line_number:>{digits}} |"), " ", content),
                )
                rendered.append(
                    Text.assemble(gray(f"  {'':>{digits}} |"), " ", _caret_padding(line, error.column), red(CARET)),
                )
            else:
                rendered.append(Text.assemble(gray(f"  {line_number:>{digits}} |"), " ", content))
        return rendered


__all__ = ["CARET", "MARKER", "TAB_SIZE", "DiagnosticRenderer", "diagnostic_window"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Actions that produce formatted source."""

from __future__ import annotations

import time

from rich.text import Text

from ..discovery.items import FileItem, WorkItem
from ..logging import gray
from .base import Action


class FormatAction(Action):
    """Print the formatted source to standard output."""

    name = "format"
    summary = "Print out the formatted version of the given files"

    def run(self, item: WorkItem) -> None:
        self.output.emit(item.handler.format(item.source, self.options.print_width))


class WriteAction(Action):
    """Format files in place and report how long each one took.

    Files whose content already matches the formatted output are not written
    and their path is shown muted. Standard input is formatted but never
    written anywhere.
    """

    name = "write"
    summary = "Read, format, and write back the source of the given files"

    def run(self, item: WorkItem) -> None:
        start = time.perf_counter()
        try:
            source = item.source
            formatted = item.handler.format(source, self.options.print_width)
            unchanged = source == formatted
            if not unchanged and isinstance(item, FileItem):
                item.handler.write(item.path, formatted)
        except Exception:
            self.output.line(item.filepath)
            raise

        elapsed_ms = round((time.perf_counter() - start) * 1000)
        label = gray(item.filepath) if unchanged else Text(item.filepath)
        self.output.line(Text.assemble(label, f" {elapsed_ms}ms"))


__all__ = ["FormatAction", "WriteAction"]

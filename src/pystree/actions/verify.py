# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Actions that verify formatting without changing any file."""

from __future__ import annotations

from ..discovery.items import WorkItem
from ..errors import FormatMismatchError, NonIdempotentFormatError
from .base import Action


class CheckAction(Action):
    """Fail items whose source differs from its formatted rendition."""

    name = "check"
    summary = "Check that the given files are formatted as pystree would format them"

    def run(self, item: WorkItem) -> None:
        try:
            source = item.source
            if source != item.handler.format(source, self.options.print_width):
                raise FormatMismatchError(item.filepath)
        except Exception:
            self.output.warn_item(item.filepath)
            raise

    def on_all_succeeded(self) -> None:
        self.output.success("All files matched expected format.")

    def on_any_failed(self) -> None:
        self.output.failure("The listed files did not match the expected format.")


class DebugAction(Action):
    """Fail items whose formatted output changes when formatted again."""

    name = "debug"
    summary = "Check that the given files can be formatted idempotently"

    def run(self, item: WorkItem) -> None:
        try:
            handler = item.handler
            width = self.options.print_width
            formatted = handler.format(item.source, width)
            if formatted != handler.format(formatted, width):
                raise NonIdempotentFormatError(item.filepath)
        except Exception:
            self.output.warn_item(item.filepath)
            raise

    def on_all_succeeded(self) -> None:
        self.output.success("All files can be formatted idempotently.")

    def on_any_failed(self) -> None:
        self.output.failure("The listed files could not be formatted idempotently.")


__all__ = ["CheckAction", "DebugAction"]

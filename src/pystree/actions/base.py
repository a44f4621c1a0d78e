# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Base contract shared by every action."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from ..config.models import Options
from ..discovery.items import WorkItem
from ..reporting.output import OutputStreams


class Action(ABC):
    """Unit of work applied to every item of a run.

    Actions hold no per-item state, so a single instance is shared by all
    workers. :meth:`run` either returns normally or raises; the worker
    classifies whatever it raises. The hooks run once after the queue is
    drained, and only when at least one item was processed.

    Attributes:
        options: Options of the current invocation.
        output: Serialized output streams.
    """

    name: ClassVar[str]
    summary: ClassVar[str]

    def __init__(self, options: Options, output: OutputStreams) -> None:
        self.options = options
        self.output = output

    @abstractmethod
    def run(self, item: WorkItem) -> None:
        """Process ``item``.

        Args:
            item: Work item to process.
        """

    def on_all_succeeded(self) -> None:
        """Called when every processed item succeeded."""

    def on_any_failed(self) -> None:
        """Called when at least one processed item failed."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(print_width={self.options.print_width})"


__all__ = ["Action"]

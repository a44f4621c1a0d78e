# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Worker loop that drains the queue and classifies per-item failures."""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass
from typing import Final

from rich.text import Text

from ..actions.base import Action
from ..discovery.items import WorkItem
from ..errors import FatalError, FormatMismatchError, NonIdempotentFormatError, ParseError
from ..reporting.diagnostics import DiagnosticRenderer
from ..reporting.output import OutputStreams
from .outcomes import FailureKind, ItemError, ItemOutcome, WorkerReport
from .queue import WorkQueue

LOGGER = logging.getLogger(__name__)

# Never recovered at the worker boundary. Anything that is not an Exception
# (KeyboardInterrupt, SystemExit) escapes as well.
FATAL_EXCEPTIONS: Final[tuple[type[BaseException], ...]] = (FatalError, MemoryError)


def process_item(action: Action, item: WorkItem, output: OutputStreams) -> ItemOutcome:
    """Run ``action`` on ``item`` and convert any failure into an outcome.

    Parse failures are reported with a source excerpt. Format-contract
    failures are not reported again because the action already warned.
    Other exceptions are reported with their traceback.

    Args:
        action: Action applied to the item.
        item: Item to process.
        output: Output streams receiving diagnostics.

    Returns:
        ItemOutcome: Outcome carrying the classified error, if any.

    Raises:
        FatalError: Re-raised untouched, as is :class:`MemoryError` and any
            non-:class:`Exception` condition.
    """

    try:
        action.run(item)
    except FATAL_EXCEPTIONS:
        raise
    except ParseError as exc:
        _report_parse_failure(exc, item, output)
        return ItemOutcome(
            item.filepath,
            ItemError(FailureKind.PARSE, exc.message, line=exc.line, column=exc.column),
        )
    except FormatMismatchError as exc:
        return ItemOutcome(item.filepath, ItemError(FailureKind.FORMAT_MISMATCH, str(exc)))
    except NonIdempotentFormatError as exc:
        return ItemOutcome(item.filepath, ItemError(FailureKind.NON_IDEMPOTENT, str(exc)))
    except Exception as exc:
        trace = "".join(traceback.format_exception(exc))
        message = str(exc) or type(exc).__name__
        output.error_block([Text(message), *(Text(line) for line in trace.rstrip().splitlines())])
        return ItemOutcome(item.filepath, ItemError(FailureKind.GENERIC, message, trace=trace))
    return ItemOutcome(item.filepath)


def _report_parse_failure(error: ParseError, item: WorkItem, output: OutputStreams) -> None:
    lines: list[Text] = [Text(f"Error: {error.message}")]
    if item.source_loaded:
        renderer = DiagnosticRenderer(item.handler.colorize)
        lines.extend(renderer.render(error, item.source))
    output.error_block(lines)


@dataclass(slots=True)
class Worker:
    """Pop items until the queue is empty, recording each outcome.

    Attributes:
        index: Worker number, used for debugging output.
        queue: Shared queue of pending items.
        action: Action applied to every item.
        output: Output streams shared by all workers.
    """

    index: int
    queue: WorkQueue[WorkItem]
    action: Action
    output: OutputStreams

    def __call__(self) -> WorkerReport:
        """Drain the queue and return this worker's report.

        Returns:
            WorkerReport: Outcomes in the order this worker processed them.
        """

        report = WorkerReport(worker=self.index)
        try:
            while (item := self.queue.pop()) is not None:
                report.outcomes.append(process_item(self.action, item, self.output))
        except BaseException:
            dropped = self.queue.cancel()
            LOGGER.debug("worker %d aborted; dropped %d queued item(s)", self.index, dropped)
            raise
        LOGGER.debug("worker %d processed %d item(s)", self.index, len(report.outcomes))
        return report


__all__ = ["FATAL_EXCEPTIONS", "Worker", "process_item"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Bounded worker pool and the dispatcher that drives an action over a run."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

from ..actions.base import Action
from ..discovery.items import WorkItem
from ..reporting.output import OutputStreams
from .outcomes import RunSummary, WorkerReport
from .queue import WorkQueue
from .worker import Worker

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class WorkerPool:
    """Run up to ``max_workers`` workers over a fully populated queue.

    Attributes:
        action: Action applied to every item.
        output: Output streams shared by the workers.
        max_workers: Upper bound on concurrent workers.
    """

    action: Action
    output: OutputStreams
    max_workers: int

    def worker_count(self, queue_size: int) -> int:
        """Return ``min(max_workers, queue_size)``, never below zero."""

        return max(min(self.max_workers, queue_size), 0)

    def run(self, queue: WorkQueue[WorkItem]) -> RunSummary:
        """Drain ``queue`` and return the aggregate summary.

        Failures of individual items never stop the other items. A fatal
        condition raised by any worker cancels the remaining items and is
        re-raised here.

        Args:
            queue: Queue populated with every item of the run.

        Returns:
            RunSummary: Aggregate of every worker's report.
        """

        queue.seal()
        count = self.worker_count(len(queue))
        if count == 0:
            return RunSummary()
        LOGGER.debug("starting %d worker(s) for %d item(s)", count, len(queue))

        reports: list[WorkerReport] = []
        with ThreadPoolExecutor(max_workers=count, thread_name_prefix="pystree-worker") as executor:
            futures = [
                executor.submit(Worker(index=index, queue=queue, action=self.action, output=self.output))
                for index in range(count)
            ]
            for future in as_completed(futures):
                reports.append(future.result())
        reports.sort(key=lambda report: report.worker)
        return RunSummary.from_reports(reports)


@dataclass(slots=True)
class Dispatcher:
    """Queue the work items, run the pool and invoke the action's hooks."""

    action: Action
    output: OutputStreams
    max_workers: int

    def dispatch(self, items: Sequence[WorkItem]) -> RunSummary:
        """Process ``items`` and return the summary.

        The success or failure hook runs only when at least one item was
        processed.

        Args:
            items: Work items in queue order.

        Returns:
            RunSummary: Aggregate result; ``exit_code`` is 1 when any item failed.
        """

        queue: WorkQueue[WorkItem] = WorkQueue()
        queue.push_many(items)
        pool = WorkerPool(action=self.action, output=self.output, max_workers=self.max_workers)
        summary = pool.run(queue)
        if summary.processed:
            if summary.failed:
                self.action.on_any_failed()
            else:
                self.action.on_all_succeeded()
        return summary


__all__ = ["Dispatcher", "WorkerPool"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Result records produced by workers and aggregated by the pool."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class FailureKind(str, Enum):
    """Enumerate the classified per-item failure categories."""

    PARSE = "parse"
    FORMAT_MISMATCH = "format-mismatch"
    NON_IDEMPOTENT = "non-idempotent"
    GENERIC = "generic"


@dataclass(frozen=True, slots=True)
class ItemError:
    """Classified failure of a single work item.

    Attributes:
        kind: Failure category.
        message: Human-readable description.
        line: 1-based line of a parse failure.
        column: 0-based column of a parse failure.
        trace: Formatted traceback of a generic failure.
    """

    kind: FailureKind
    message: str
    line: int | None = None
    column: int | None = None
    trace: str | None = None


@dataclass(frozen=True, slots=True)
class ItemOutcome:
    """Outcome of running the action on one item."""

    filepath: str
    error: ItemError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(slots=True)
class WorkerReport:
    """Outcomes collected by a single worker, in the order it processed them."""

    worker: int
    outcomes: list[ItemOutcome] = field(default_factory=list)

    @property
    def errored(self) -> bool:
        return any(outcome.failed for outcome in self.outcomes)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Aggregate result of draining the queue.

    Attributes:
        reports: Per-worker reports.
        failed: ``True`` when any worker saw a failing item.
    """

    reports: tuple[WorkerReport, ...] = ()
    failed: bool = False

    @classmethod
    def from_reports(cls, reports: Iterable[WorkerReport]) -> RunSummary:
        collected = tuple(reports)
        failed = False
        for report in collected:
            failed |= report.errored
        return cls(reports=collected, failed=failed)

    @property
    def outcomes(self) -> tuple[ItemOutcome, ...]:
        return tuple(outcome for report in self.reports for outcome in report.outcomes)

    @property
    def processed(self) -> int:
        return sum(len(report.outcomes) for report in self.reports)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


__all__ = ["FailureKind", "ItemError", "ItemOutcome", "RunSummary", "WorkerReport"]

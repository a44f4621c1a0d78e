# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Orchestration package coordinating queued work across workers."""

from __future__ import annotations

from .outcomes import FailureKind, ItemError, ItemOutcome, RunSummary, WorkerReport
from .pool import Dispatcher, WorkerPool
from .queue import QueueSealedError, WorkQueue
from .worker import FATAL_EXCEPTIONS, Worker, process_item

__all__ = [
    "FATAL_EXCEPTIONS",
    "Dispatcher",
    "FailureKind",
    "ItemError",
    "ItemOutcome",
    "QueueSealedError",
    "RunSummary",
    "WorkQueue",
    "Worker",
    "WorkerPool",
    "WorkerReport",
    "process_item",
]

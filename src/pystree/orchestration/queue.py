# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thread-safe FIFO of work items consumed exactly once."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from threading import Lock
from typing import Generic, TypeVar

ItemT = TypeVar("ItemT")


class QueueSealedError(RuntimeError):
    """Raised when items are pushed after consumption has started."""


class WorkQueue(Generic[ItemT]):
    """FIFO queue with a population phase followed by a consumption phase.

    All items are pushed before any worker starts. The first :meth:`pop`
    (or an explicit :meth:`seal`) closes the queue to further pushes, so
    :meth:`pop` never has to wait for a producer: it returns the next item or
    ``None`` once the queue is empty.
    """

    def __init__(self, items: Iterable[ItemT] = ()) -> None:
        self._items: deque[ItemT] = deque(items)
        self._lock = Lock()
        self._sealed = False

    def push_many(self, items: Iterable[ItemT]) -> None:
        """Append ``items`` in order.

        Args:
            items: Items to enqueue.

        Raises:
            QueueSealedError: If consumption has already started.
        """

        with self._lock:
            if self._sealed:
                raise QueueSealedError("cannot push onto a queue that is being consumed")
            self._items.extend(items)

    def seal(self) -> None:
        with self._lock:
            self._sealed = True

    def pop(self) -> ItemT | None:
        """Remove and return the next item, or ``None`` when the queue is empty."""

        with self._lock:
            self._sealed = True
            if not self._items:
                return None
            return self._items.popleft()

    def cancel(self) -> int:
        """Drop every remaining item and return how many were dropped."""

        with self._lock:
            self._sealed = True
            dropped = len(self._items)
            self._items.clear()
            return dropped

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


__all__ = ["QueueSealedError", "WorkQueue"]

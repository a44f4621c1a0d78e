# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Work items: the files (or standard input) processed by an action."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import TextIO

from ..constants import STDIN_FILEPATH
from ..handlers.registry import HandlerRegistry
from ..interfaces.handlers import SourceHandler


class WorkItem(ABC):
    """One unit of work with a lazily read, cached source text.

    The source is read at most once per item. A failed read is cached as well
    so that later accesses re-raise the same error instead of reading again.
    """

    def __init__(self, handlers: HandlerRegistry) -> None:
        self._handlers = handlers
        self._lock = Lock()
        self._loaded = False
        self._source = ""
        self._error: BaseException | None = None

    @property
    @abstractmethod
    def filepath(self) -> str:
        """Return the path shown to the user for this item."""

    @property
    @abstractmethod
    def handler(self) -> SourceHandler:
        """Return the handler responsible for this item's source."""

    @abstractmethod
    def _read(self) -> str:
        """Read the source text from its origin."""

    @property
    def source(self) -> str:
        """Return the item's source text, reading it on first access.

        Returns:
            str: Source text.
        """

        with self._lock:
            if not self._loaded:
                try:
                    self._source = self._read()
                except Exception as exc:
                    self._error = exc
                self._loaded = True
            if self._error is not None:
                raise self._error
            return self._source

    @property
    def source_loaded(self) -> bool:
        return self._loaded and self._error is None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.filepath!r})"


class FileItem(WorkItem):
    """Work item backed by a regular file."""

    def __init__(self, filepath: str, *, root: Path, handlers: HandlerRegistry) -> None:
        """Create an item for ``filepath``.

        Args:
            filepath: Path as displayed to the user (usually relative to ``root``).
            root: Directory relative paths are resolved against.
            handlers: Registry used to resolve the handler by extension.
        """

        super().__init__(handlers)
        self._filepath = filepath
        self.path = root / filepath

    @property
    def filepath(self) -> str:
        return self._filepath

    @property
    def handler(self) -> SourceHandler:
        return self._handlers.for_path(self.path)

    def _read(self) -> str:
        return self.handler.read(self.path)


class StdinItem(WorkItem):
    """Work item reading the process's standard input."""

    def __init__(self, stream: TextIO, *, handlers: HandlerRegistry) -> None:
        super().__init__(handlers)
        self._stream = stream

    @property
    def filepath(self) -> str:
        return STDIN_FILEPATH

    @property
    def handler(self) -> SourceHandler:
        return self._handlers.default

    def _read(self) -> str:
        return self._stream.read()


__all__ = ["FileItem", "StdinItem", "WorkItem"]

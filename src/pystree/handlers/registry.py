# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry mapping file extensions to source handlers."""

from __future__ import annotations

import logging
from pathlib import Path
from threading import RLock

from ..constants import DEFAULT_EXTENSION
from ..errors import UnsupportedFileTypeError
from ..interfaces.handlers import SourceHandler

LOGGER = logging.getLogger(__name__)


def normalize_extension(extension: str) -> str:
    """Return ``extension`` with a single leading dot.

    Args:
        extension: Extension such as ``"py"`` or ``".py"``.

    Returns:
        str: Normalised extension such as ``".py"``.

    Raises:
        ValueError: If ``extension`` is empty.
    """

    stripped = extension.strip().lstrip(".")
    if not stripped:
        raise ValueError("file extension must not be empty")
    return f".{stripped}"


class HandlerRegistry:
    """Thread-safe lookup of :class:`SourceHandler` objects by file extension.

    Plugins extend the registry before any work is queued; workers only read
    from it afterwards.
    """

    def __init__(self, *, default_extension: str = DEFAULT_EXTENSION) -> None:
        self._handlers: dict[str, SourceHandler] = {}
        self._default_extension = normalize_extension(default_extension)
        self._lock = RLock()

    def register(self, extension: str, handler: SourceHandler) -> None:
        """Associate ``handler`` with ``extension``, replacing any previous entry.

        Args:
            extension: File extension handled by ``handler``.
            handler: Handler implementing the parse/format capabilities.
        """

        key = normalize_extension(extension)
        with self._lock:
            previous = self._handlers.get(key)
            self._handlers[key] = handler
        if previous is not None and previous is not handler:
            LOGGER.debug("handler for %s replaced: %s -> %s", key, previous.name, handler.name)

    def get(self, extension: str) -> SourceHandler | None:
        with self._lock:
            return self._handlers.get(extension)

    def for_path(self, path: str | Path) -> SourceHandler:
        """Return the handler responsible for ``path``.

        Args:
            path: File path whose suffix selects the handler.

        Returns:
            SourceHandler: Registered handler for the suffix.

        Raises:
            UnsupportedFileTypeError: If no handler is registered for the suffix.
        """

        extension = Path(path).suffix
        handler = self.get(extension)
        if handler is None:
            raise UnsupportedFileTypeError(extension)
        return handler

    @property
    def default(self) -> SourceHandler:
        """Return the handler used for standard input."""

        handler = self.get(self._default_extension)
        if handler is None:
            raise UnsupportedFileTypeError(self._default_extension)
        return handler

    def extensions(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._handlers))

    def __contains__(self, extension: object) -> bool:
        if not isinstance(extension, str):
            return False
        with self._lock:
            return extension in self._handlers


def build_default_registry() -> HandlerRegistry:
    """Return a registry pre-populated with the built-in Python handler.

    Returns:
        HandlerRegistry: Registry handling ``.py`` and ``.pyi`` files.
    """

    from .python import PythonHandler  # pylint: disable=import-outside-toplevel

    registry = HandlerRegistry()
    handler = PythonHandler()
    for extension in PythonHandler.extensions:
        registry.register(extension, handler)
    return registry


__all__ = ["HandlerRegistry", "build_default_registry", "normalize_extension"]

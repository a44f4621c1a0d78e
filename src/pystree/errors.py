# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the pystree runtime.

Per-item failures (:class:`ParseError`, :class:`ItemFailure` and any other
:class:`Exception`) are recovered at the worker boundary. Start-up failures
derive from :class:`StartupError` and abort the invocation before any work is
queued. :class:`FatalError` is never recovered by a worker.
"""

from __future__ import annotations


class PystreeError(Exception):
    """Base class for errors raised by pystree."""


class ParseError(PystreeError):
    """Raised by a handler when source text cannot be parsed.

    Attributes:
        message: Human-readable description of the syntax problem.
        line: 1-based line number of the failure.
        column: 0-based column of the failure within ``line``.
    """

    def __init__(self, message: str, *, line: int, column: int) -> None:
        """Initialise the error with its location.

        Args:
            message: Human-readable description of the syntax problem.
            line: 1-based line number of the failure.
            column: 0-based column of the failure within ``line``.
        """

        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


class ItemFailure(PystreeError):
    """Base class for contract failures that actions report themselves."""


class FormatMismatchError(ItemFailure):
    """Raised when a source does not match its formatted rendition."""


class NonIdempotentFormatError(ItemFailure):
    """Raised when formatting a formatted source changes it again."""


class UnsupportedFileTypeError(PystreeError):
    """Raised when no handler is registered for a file extension."""

    def __init__(self, extension: str) -> None:
        label = extension or "<none>"
        super().__init__(f"No handler registered for file extension {label!r}")
        self.extension = extension


class StartupError(PystreeError):
    """Raised for failures that abort an invocation before work is queued."""


class ConfigError(StartupError):
    """Raised when configuration input is invalid."""


class PluginLoadError(StartupError):
    """Raised when a requested plugin cannot be imported or registered."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Unable to load plugin {name!r}: {reason}")
        self.name = name


class FatalError(PystreeError):
    """Raised for environment-level faults that must terminate the run."""


__all__ = [
    "ConfigError",
    "FatalError",
    "FormatMismatchError",
    "ItemFailure",
    "NonIdempotentFormatError",
    "ParseError",
    "PluginLoadError",
    "PystreeError",
    "StartupError",
    "UnsupportedFileTypeError",
]

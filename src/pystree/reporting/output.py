# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Serialized access to the standard output and error streams."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from threading import RLock
from typing import TextIO

import typer
from rich.console import Console
from rich.text import Text

from ..logging import fail, info, ok, warn, warn_label
from ..runtime.environment import RuntimeEnvironment


@dataclass(slots=True)
class OutputStreams:
    """Write action output and diagnostics from concurrent workers.

    Every method holds one shared lock for the duration of its write, so a
    multi-line block (such as a parse excerpt) is never interleaved with
    output from another worker.

    Attributes:
        stdout: Raw standard output stream used for verbatim payloads.
        out: Console bound to standard output for styled lines.
        err: Console bound to standard error.
    """

    stdout: TextIO
    out: Console
    err: Console
    _lock: RLock = field(default_factory=RLock)

    @classmethod
    def from_environment(cls, environment: RuntimeEnvironment) -> OutputStreams:
        return cls(stdout=environment.stdout, out=environment.out, err=environment.err)

    def emit(self, payload: str) -> None:
        """Write ``payload`` verbatim to stdout, adding a newline unless present.

        Args:
            payload: Text such as formatted source or JSON.
        """

        with self._lock:
            typer.echo(payload, file=self.stdout, nl=not payload.endswith("\n"))

    def line(self, message: str | Text) -> None:
        """Print a styled line on stdout."""

        with self._lock:
            info(self.out, message)

    def success(self, message: str) -> None:
        with self._lock:
            ok(self.out, message)

    def failure(self, message: str) -> None:
        with self._lock:
            fail(self.err, message)

    def warn(self, message: str | Text) -> None:
        with self._lock:
            warn(self.err, message)

    def warn_item(self, filepath: str) -> None:
        """Print the ``[warn] <filepath>`` line for a failing item."""

        self.warn(warn_label(filepath))

    def error_block(self, lines: Sequence[str | Text]) -> None:
        """Print ``lines`` to stderr as one uninterrupted block.

        Args:
            lines: Lines of the block in display order.
        """

        with self._lock:
            for entry in lines:
                self.err.print(entry)


__all__ = ["OutputStreams"]

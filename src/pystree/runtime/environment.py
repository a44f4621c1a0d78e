# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process-level context passed explicitly through the runtime."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from rich.console import Console

from ..handlers.registry import HandlerRegistry, build_default_registry
from .console import RichConsoleManager, detect_tty


@dataclass(slots=True)
class RuntimeEnvironment:
    """Describe the streams, working directory and handlers of one invocation.

    Attributes:
        cwd: Directory used to locate the config file and expand patterns.
        stdin: Stream read by the standard-input work item.
        stdout: Stream receiving regular action output.
        stderr: Stream receiving warnings and diagnostics.
        stdin_is_tty: Whether ``stdin`` is an interactive terminal.
        cpu_count: Upper bound on the number of concurrent workers.
        color: Whether colour output is allowed on terminal streams.
        handlers: Registry of file-extension handlers, extended by plugins.
    """

    cwd: Path
    stdin: TextIO
    stdout: TextIO
    stderr: TextIO
    stdin_is_tty: bool = False
    cpu_count: int = 1
    color: bool = True
    handlers: HandlerRegistry = field(default_factory=build_default_registry)
    consoles: RichConsoleManager = field(default_factory=RichConsoleManager)

    @classmethod
    def from_process(cls) -> RuntimeEnvironment:
        """Return an environment bound to the current process.

        Returns:
            RuntimeEnvironment: Environment using the real streams and cwd.
        """

        return cls(
            cwd=Path.cwd(),
            stdin=sys.stdin,
            stdout=sys.stdout,
            stderr=sys.stderr,
            stdin_is_tty=detect_tty(sys.stdin),
            cpu_count=os.cpu_count() or 1,
            color="NO_COLOR" not in os.environ,
        )

    @property
    def out(self) -> Console:
        """Return the console bound to standard output."""

        return self.consoles.get(self.stdout, color=self.color)

    @property
    def err(self) -> Console:
        """Return the console bound to standard error."""

        return self.consoles.get(self.stderr, color=self.color)


__all__ = ["RuntimeEnvironment"]

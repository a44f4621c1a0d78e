# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

from threading import Lock
from typing import Literal, TextIO

from rich.console import Console


def detect_tty(stream: TextIO) -> bool:
    """Return ``True`` when ``stream`` appears to be backed by a terminal.

    Args:
        stream: Text stream to probe.

    Returns:
        bool: ``True`` when ``stream`` reports TTY support, ``False`` otherwise.
    """

    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by stream and colour settings."""

    def __init__(self) -> None:
        """Initialise the manager with an in-memory cache keyed by presentation flags."""

        self._cache: dict[tuple[int, bool], Console] = {}
        self._lock = Lock()

    def get(self, stream: TextIO, *, color: bool) -> Console:
        """Return a Rich console writing to ``stream``.

        Colour is only emitted when requested and ``stream`` is a terminal.
        Markup and automatic highlighting are disabled so that file paths and
        messages are rendered verbatim.

        Args:
            stream: Destination text stream.
            color: ``True`` when ANSI colour output should be enabled.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        key = (id(stream), color)
        with self._lock:
            if key not in self._cache:
                tty = detect_tty(stream)
                color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
                    "auto" if color and tty else None
                )
                self._cache[key] = Console(
                    file=stream,
                    color_system=color_system,
                    force_terminal=color and tty,
                    no_color=not (color and tty),
                    markup=False,
                    highlight=False,
                    emoji=False,
                    soft_wrap=True,
                )
            return self._cache[key]

    def __call__(self, stream: TextIO, *, color: bool) -> Console:
        """Return a console to satisfy factory semantics.

        Args:
            stream: Destination text stream.
            color: ``True`` when ANSI colour output should be enabled.

        Returns:
            Console: Console configured with the requested presentation flags.
        """

        return self.get(stream, color=color)


__all__ = ["RichConsoleManager", "detect_tty"]

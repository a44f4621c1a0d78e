# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve command-line patterns into concrete work items."""

from __future__ import annotations

import glob
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..runtime.environment import RuntimeEnvironment
from .items import FileItem, StdinItem, WorkItem

LOGGER = logging.getLogger(__name__)


def expand_pattern(pattern: str, root: Path) -> Iterable[str]:
    """Yield regular files matched by ``pattern`` relative to ``root``.

    Directories and symlinks that do not point at regular files are skipped.
    A pattern without matches yields nothing.

    Args:
        pattern: Glob pattern, ``**`` matches recursively.
        root: Directory relative patterns are expanded against.

    Yields:
        str: Matched paths as written by the pattern (relative or absolute).
    """

    for match in sorted(glob.glob(pattern, root_dir=root, recursive=True)):
        if (root / match).is_file():
            yield match


def resolve_work_items(patterns: Sequence[str], environment: RuntimeEnvironment) -> list[WorkItem]:
    """Return the work items for ``patterns``.

    With no patterns and a non-interactive standard input, the result is a
    single :class:`StdinItem`. Otherwise every pattern is expanded; a file
    matched by several patterns is queued once.

    Args:
        patterns: Positional arguments left after option parsing.
        environment: Runtime context providing cwd, stdin and handlers.

    Returns:
        list[WorkItem]: Items in pattern order.
    """

    if not patterns and not environment.stdin_is_tty:
        return [StdinItem(environment.stdin, handlers=environment.handlers)]

    items: list[WorkItem] = []
    seen: set[Path] = set()
    for pattern in patterns:
        matched = 0
        for filepath in expand_pattern(pattern, environment.cwd):
            item = FileItem(filepath, root=environment.cwd, handlers=environment.handlers)
            key = item.path.resolve()
            if key in seen:
                continue
            seen.add(key)
            items.append(item)
            matched += 1
        LOGGER.debug("pattern %r matched %d file(s)", pattern, matched)
    return items


__all__ = ["expand_pattern", "resolve_work_items"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Project-local configuration file holding extra command-line arguments."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..constants import CONFIG_FILENAME

LOGGER = logging.getLogger(__name__)


class ConfigFile:
    """Read additional arguments from ``.pystreerc`` in the working directory.

    Each line of the file is one argument, as in::

        --plugins=tabs
        --print-width=100

    The lines are prepended to the real command-line arguments so that flags
    given on the command line win over the file.
    """

    name = CONFIG_FILENAME

    def __init__(self, cwd: Path) -> None:
        self.filepath = cwd / CONFIG_FILENAME

    def exists(self) -> bool:
        return self.filepath.is_file()

    def arguments(self) -> list[str]:
        """Return the configured arguments, or an empty list when absent."""

        if not self.exists():
            return []
        try:
            content = self.filepath.read_text(encoding="utf-8")
        except OSError as exc:
            LOGGER.debug("ignoring unreadable config file %s: %s", self.filepath, exc)
            return []
        return [line for line in content.splitlines() if line.strip()]

    def describe(self) -> str:
        return f"config file at {self.filepath}"


def merge_arguments(config_file: ConfigFile, arguments: Sequence[str]) -> list[str]:
    """Return ``arguments`` with the config file's lines prepended.

    Args:
        config_file: Config file located in the working directory.
        arguments: Command-line arguments following the command name.

    Returns:
        list[str]: Combined argument list, config entries first.
    """

    merged = [*config_file.arguments(), *arguments]
    LOGGER.debug("merged arguments from %s: %s", config_file.describe(), merged)
    return merged


__all__ = ["ConfigFile", "merge_arguments"]

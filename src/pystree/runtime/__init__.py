# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime context and console helpers."""

from __future__ import annotations

from .console import RichConsoleManager, detect_tty
from .environment import RuntimeEnvironment

__all__ = ["RichConsoleManager", "RuntimeEnvironment", "detect_tty"]

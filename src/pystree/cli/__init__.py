# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for pystree."""

from __future__ import annotations

from .main import main, run

__all__ = ["main", "run"]

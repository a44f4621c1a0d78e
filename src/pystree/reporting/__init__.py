# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Output and diagnostic rendering."""

from __future__ import annotations

from .diagnostics import DiagnosticRenderer, diagnostic_window
from .output import OutputStreams

__all__ = ["DiagnosticRenderer", "OutputStreams", "diagnostic_window"]

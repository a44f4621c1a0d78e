# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language handlers providing parse and format capabilities."""

from __future__ import annotations

from .registry import HandlerRegistry, build_default_registry, normalize_extension

__all__ = ["HandlerRegistry", "build_default_registry", "normalize_extension"]

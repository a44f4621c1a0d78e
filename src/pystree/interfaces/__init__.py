# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocol definitions shared across pystree."""

from __future__ import annotations

from .handlers import JSONValue, SourceHandler, SyntaxTree, TreeVisitor

__all__ = ["JSONValue", "SourceHandler", "SyntaxTree", "TreeVisitor"]

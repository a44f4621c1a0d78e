# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Work item discovery."""

from __future__ import annotations

from .items import FileItem, StdinItem, WorkItem
from .resolver import expand_pattern, resolve_work_items

__all__ = ["FileItem", "StdinItem", "WorkItem", "expand_pattern", "resolve_work_items"]

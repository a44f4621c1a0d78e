# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and sources."""

from __future__ import annotations

from ..errors import ConfigError
from .models import Options, split_plugin_names
from .sources import ConfigFile, merge_arguments

__all__ = ["ConfigError", "ConfigFile", "Options", "merge_arguments", "split_plugin_names"]

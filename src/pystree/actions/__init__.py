# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""The closed set of actions selectable from the command line."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .base import Action
from .emit import FormatAction, WriteAction
from .inspect import AstAction, DocAction, JsonAction, MatchAction
from .verify import CheckAction, DebugAction

ACTIONS: Final[Mapping[str, type[Action]]] = MappingProxyType(
    {
        action.name: action
        for action in (
            AstAction,
            CheckAction,
            DebugAction,
            DocAction,
            FormatAction,
            JsonAction,
            MatchAction,
            WriteAction,
        )
    },
)

__all__ = [
    "ACTIONS",
    "Action",
    "AstAction",
    "CheckAction",
    "DebugAction",
    "DocAction",
    "FormatAction",
    "JsonAction",
    "MatchAction",
    "WriteAction",
]

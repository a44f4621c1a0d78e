# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Actions that print a representation of the parsed source."""

from __future__ import annotations

import json
from pprint import pformat

from ..discovery.items import WorkItem
from .base import Action


class AstAction(Action):
    """Print a debug representation of the syntax tree."""

    name = "ast"
    summary = "Print out the AST corresponding to the given files"

    def run(self, item: WorkItem) -> None:
        self.output.emit(item.handler.parse(item.source).pretty())


class DocAction(Action):
    """Print the first group of the formatter's intermediate representation."""

    name = "doc"
    summary = "Print out the doc tree that would be used to format the given files"

    def run(self, item: WorkItem) -> None:
        handler = item.handler
        source = item.source
        handler.parse(source)
        groups = handler.doc_groups(source, self.options.print_width)
        self.output.emit(pformat(groups[0] if groups else None))


class JsonAction(Action):
    """Print the syntax tree as pretty-printed JSON."""

    name = "json"
    summary = "Print out the JSON representation of the given files"

    def run(self, item: WorkItem) -> None:
        handler = item.handler
        payload = handler.json_visitor().visit(handler.parse(item.source))
        self.output.emit(json.dumps(payload, indent=2))


class MatchAction(Action):
    """Print a structural pattern that would match the syntax tree."""

    name = "match"
    summary = "Print out a pattern-matching expression that would match the given files"

    def run(self, item: WorkItem) -> None:
        self.output.emit(item.handler.parse(item.source).construct_match_expression())


__all__ = ["AstAction", "DocAction", "JsonAction", "MatchAction"]

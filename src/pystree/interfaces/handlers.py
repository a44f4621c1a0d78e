# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Capability interfaces implemented by language handlers."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable

from rich.text import Text

JSONValue: TypeAlias = None | bool | int | float | str | Sequence["JSONValue"] | Mapping[str, "JSONValue"]


@runtime_checkable
class SyntaxTree(Protocol):
    """Parsed representation of one source text."""

    def pretty(self) -> str:
        """Return a debug representation of the tree."""

        raise NotImplementedError

    def construct_match_expression(self) -> str:
        """Return a structural pattern that matches the tree."""

        raise NotImplementedError


@runtime_checkable
class TreeVisitor(Protocol):
    """Visitor converting a syntax tree into JSON-compatible data."""

    def visit(self, tree: SyntaxTree) -> JSONValue:
        """Return the JSON-compatible form of ``tree``."""

        raise NotImplementedError


@runtime_checkable
class SourceHandler(Protocol):
    """Parse and format operations for one family of file extensions.

    Handlers are shared by every worker, so implementations must not keep
    per-call state on the instance.
    """

    name: str

    def read(self, path: Path) -> str:
        """Return the text content of ``path``."""

        raise NotImplementedError

    def write(self, path: Path, text: str) -> None:
        """Replace the content of ``path`` with ``text`` using the file's own encoding."""

        raise NotImplementedError

    def parse(self, source: str) -> SyntaxTree:
        """Return the syntax tree for ``source``.

        Raises:
            ParseError: If ``source`` is not syntactically valid.
        """

        raise NotImplementedError

    def format(self, source: str, print_width: int) -> str:
        """Return ``source`` formatted to fit ``print_width`` columns.

        Raises:
            ParseError: If ``source`` is not syntactically valid.
        """

        raise NotImplementedError

    def doc_groups(self, source: str, print_width: int) -> Sequence[object]:
        """Return the formatter's intermediate grouping structure for ``source``."""

        raise NotImplementedError

    def json_visitor(self) -> TreeVisitor:
        """Return a visitor that converts trees produced by :meth:`parse` to JSON."""

        raise NotImplementedError

    def colorize(self, line: str) -> Text:
        """Return ``line`` with syntax highlighting applied."""

        raise NotImplementedError


__all__ = ["JSONValue", "SourceHandler", "SyntaxTree", "TreeVisitor"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Built-in handler for Python sources backed by :mod:`ast` and Black."""

from __future__ import annotations

import ast
import re
import tokenize
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Final

import black
from black.linegen import LineGenerator
from black.parsing import InvalidInput, lib2to3_parse
from rich.syntax import Syntax
from rich.text import Text

from ..errors import ParseError
from .visitors import JSONVisitor, construct_match_expression

_BLACK_LOCATION: Final[re.Pattern[str]] = re.compile(r"(?P<line>\d+):(?P<column>\d+): ?(?P<detail>.*)$")


@dataclass(frozen=True, slots=True)
class PythonTree:
    """Syntax tree wrapper around a parsed :class:`ast.Module`."""

    node: ast.Module

    def pretty(self) -> str:
        return ast.dump(self.node, indent=2)

    def construct_match_expression(self) -> str:
        return construct_match_expression(self.node)


@dataclass(frozen=True, slots=True)
class DocGroup:
    """One logical line produced by Black's line generator.

    Attributes:
        depth: Indentation depth of the line.
        tokens: Leaf values making up the line.
        text: Rendered line without indentation.
    """

    depth: int
    tokens: tuple[str, ...]
    text: str


class PythonHandler:
    """Parse with :mod:`ast`, format with Black, highlight with Rich."""

    name = "python"
    extensions: ClassVar[tuple[str, ...]] = (".py", ".pyi")

    def __init__(self, *, theme: str = "ansi_dark") -> None:
        self._theme = theme

    def read(self, path: Path) -> str:
        """Return the decoded content of ``path`` honouring PEP 263 encoding cookies."""

        with tokenize.open(path) as handle:
            return handle.read()

    def write(self, path: Path, text: str) -> None:
        """Write ``text`` to ``path`` in the encoding the file currently declares.

        Args:
            path: Existing Python source file.
            text: Replacement source text.
        """

        with path.open("rb") as handle:
            encoding, _ = tokenize.detect_encoding(handle.readline)
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(text)

    def parse(self, source: str) -> PythonTree:
        """Return the syntax tree for ``source``.

        Args:
            source: Python source text.

        Returns:
            PythonTree: Wrapper around the parsed module.

        Raises:
            ParseError: If ``source`` is not valid Python.
        """

        try:
            return PythonTree(ast.parse(source))
        except SyntaxError as exc:
            line = exc.lineno or 1
            column = max((exc.offset or 1) - 1, 0)
            raise ParseError(exc.msg, line=line, column=column) from exc
        except ValueError as exc:
            raise ParseError(str(exc), line=1, column=0) from exc

    def format(self, source: str, print_width: int) -> str:
        """Return ``source`` formatted by Black at ``print_width`` columns.

        Args:
            source: Python source text.
            print_width: Maximum line length.

        Returns:
            str: Formatted source.

        Raises:
            ParseError: If ``source`` is not valid Python.
        """

        self.parse(source)
        try:
            return black.format_str(source, mode=black.Mode(line_length=print_width))
        except InvalidInput as exc:
            raise _parse_error_from_black(exc) from exc

    def doc_groups(self, source: str, print_width: int) -> Sequence[DocGroup]:
        """Return the logical lines Black builds before splitting them to width.

        Args:
            source: Python source text.
            print_width: Maximum line length.

        Returns:
            Sequence[DocGroup]: Logical lines in source order.

        Raises:
            ParseError: If ``source`` is not valid Python.
        """

        self.parse(source)
        mode = black.Mode(line_length=print_width)
        try:
            node = lib2to3_parse(source.lstrip(), mode.target_versions)
        except InvalidInput as exc:
            raise _parse_error_from_black(exc) from exc
        generator = LineGenerator(mode=mode, features=set())
        return [
            DocGroup(
                depth=line.depth,
                tokens=tuple(leaf.value for leaf in line.leaves if leaf.value),
                text=str(line).strip(),
            )
            for line in generator.visit(node)
        ]

    def json_visitor(self) -> JSONVisitor:
        return JSONVisitor()

    def colorize(self, line: str) -> Text:
        """Return ``line`` highlighted as Python code."""

        text = Syntax(line, "python", theme=self._theme).highlight(line)
        text.rstrip()
        return text


def _parse_error_from_black(exc: InvalidInput) -> ParseError:
    message = str(exc)
    match = _BLACK_LOCATION.search(message)
    if match is None:
        return ParseError(message, line=1, column=0)
    detail = match.group("detail").strip()
    return ParseError(
        f"cannot parse: {detail}" if detail else "cannot parse",
        line=int(match.group("line")),
        column=int(match.group("column")),
    )


__all__ = ["DocGroup", "PythonHandler", "PythonTree"]

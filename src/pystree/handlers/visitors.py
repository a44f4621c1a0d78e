# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tree conversions for Python syntax trees (JSON data and match patterns)."""

from __future__ import annotations

import ast
import math
from typing import Final

from ..interfaces.handlers import JSONValue, SyntaxTree

# Fields that carry no structural information for pattern matching.
_MATCH_SKIPPED_FIELDS: Final[frozenset[str]] = frozenset({"ctx", "kind", "type_comment", "type_ignores"})
_WILDCARD: Final[str] = "_"


def _unwrap(tree: SyntaxTree | ast.AST) -> ast.AST:
    node = getattr(tree, "node", tree)
    if not isinstance(node, ast.AST):
        raise TypeError(f"expected a Python syntax tree, got {type(tree).__name__}")
    return node


class JSONVisitor:
    """Convert Python syntax trees into JSON-compatible dictionaries.

    Every node becomes ``{"type": <node class>, "location": [...], <fields>}``
    where ``location`` holds ``[line, column, end_line, end_column]`` for nodes
    that carry positions.
    """

    def visit(self, tree: SyntaxTree | ast.AST) -> JSONValue:
        """Return the JSON-compatible form of ``tree``.

        Args:
            tree: Parsed tree or raw :mod:`ast` node.

        Returns:
            JSONValue: Nested dictionaries and lists describing the tree.
        """

        return self._convert(_unwrap(tree))

    def _convert(self, value: object) -> JSONValue:
        if isinstance(value, ast.AST):
            return self._convert_node(value)
        if isinstance(value, list):
            return [self._convert(entry) for entry in value]
        if value is None or isinstance(value, (bool, int, str)):
            return value
        if isinstance(value, float):
            return value if math.isfinite(value) else repr(value)
        return repr(value)

    def _convert_node(self, node: ast.AST) -> dict[str, JSONValue]:
        payload: dict[str, JSONValue] = {"type": type(node).__name__}
        if hasattr(node, "lineno"):
            payload["location"] = [
                node.lineno,
                getattr(node, "col_offset", None),
                getattr(node, "end_lineno", None),
                getattr(node, "end_col_offset", None),
            ]
        for name, field in ast.iter_fields(node):
            payload[name] = self._convert(field)
        return payload


def construct_match_expression(tree: SyntaxTree | ast.AST) -> str:
    """Return a ``match`` class pattern that matches ``tree``.

    Values that cannot be written as literal patterns (``...``, non-finite
    floats) are replaced with the wildcard ``_``.

    Args:
        tree: Parsed tree or raw :mod:`ast` node.

    Returns:
        str: Pattern such as ``Module(body=[Pass()])``.
    """

    return _pattern(_unwrap(tree))


def _pattern(value: object) -> str:
    if isinstance(value, ast.AST):
        arguments = [
            f"{name}={_pattern(field)}"
            for name, field in ast.iter_fields(value)
            if name not in _MATCH_SKIPPED_FIELDS
        ]
        return f"{type(value).__name__}({', '.join(arguments)})"
    if isinstance(value, list):
        return f"[{', '.join(_pattern(entry) for entry in value)}]"
    if value is None or isinstance(value, (bool, int, str, bytes, complex)):
        return repr(value)
    if isinstance(value, float):
        return repr(value) if math.isfinite(value) else _WILDCARD
    return _WILDCARD


__all__ = ["JSONVisitor", "construct_match_expression"]

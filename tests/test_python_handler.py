# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the built-in Python handler and the handler registry."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

from pystree.errors import ParseError, UnsupportedFileTypeError
from pystree.handlers import HandlerRegistry, build_default_registry
from pystree.handlers.python import DocGroup, PythonHandler
from pystree.handlers.registry import normalize_extension
from pystree.handlers.visitors import construct_match_expression
from pystree.interfaces import SourceHandler


@pytest.fixture
def handler() -> PythonHandler:
    return PythonHandler()


def _matches(pattern: str, tree: ast.AST) -> bool:
    namespace: dict[str, object] = {**vars(ast), "tree": tree}
    exec(  # noqa: S102 - evaluating a generated pattern against its own tree
        f"match tree:\n    case {pattern}:\n        matched = True\n    case _:\n        matched = False\n",
        namespace,
    )
    return bool(namespace["matched"])


def test_handler_satisfies_protocol(handler: PythonHandler) -> None:
    assert isinstance(handler, SourceHandler)


def test_parse_reports_location(handler: PythonHandler) -> None:
    with pytest.raises(ParseError) as excinfo:
        handler.parse("x = 1\ny = (1,\n")

    assert excinfo.value.line == 2
    assert excinfo.value.column == 4
    assert excinfo.value.message


def test_pretty_dumps_module(handler: PythonHandler) -> None:
    assert handler.parse("pass\n").pretty().startswith("Module(")


def test_format_applies_black(handler: PythonHandler) -> None:
    assert handler.format("x=1\n", 80) == "x = 1\n"


def test_format_respects_print_width(handler: PythonHandler) -> None:
    source = "value = compute(alpha, beta, gamma)\n"

    assert handler.format(source, 80) == source
    assert handler.format(source, 30) == "value = compute(\n    alpha, beta, gamma\n)\n"


def test_format_rejects_invalid_source(handler: PythonHandler) -> None:
    with pytest.raises(ParseError):
        handler.format("def broken(:\n", 80)


def test_doc_groups_describe_logical_lines(handler: PythonHandler) -> None:
    groups = handler.doc_groups("x=1\ndef f():\n    return x\n", 80)

    assert groups[0] == DocGroup(depth=0, tokens=("x", "=", "1"), text="x = 1")
    assert [group.depth for group in groups] == [0, 0, 1]
    assert groups[-1].text == "return x"


def test_json_visitor_emits_types_and_locations(handler: PythonHandler) -> None:
    payload = handler.json_visitor().visit(handler.parse("x = 1\n"))

    assert isinstance(payload, dict)
    assign = payload["body"][0]
    assert assign["type"] == "Assign"
    assert assign["location"] == [1, 0, 1, 5]
    assert assign["targets"][0]["id"] == "x"
    assert assign["value"]["value"] == 1


def test_match_expression_matches_its_tree(handler: PythonHandler) -> None:
    tree = handler.parse("x = 1\n")
    pattern = tree.construct_match_expression()

    assert pattern == "Module(body=[Assign(targets=[Name(id='x')], value=Constant(value=1))])"
    assert _matches(pattern, tree.node)
    assert not _matches(pattern, ast.parse("y = 1\n"))


def test_match_expression_uses_wildcard_for_ellipsis() -> None:
    node = ast.parse("...\n")

    pattern = construct_match_expression(node)

    assert pattern == "Module(body=[Expr(value=Constant(value=_))])"
    assert _matches(pattern, node)


def test_read_honours_encoding_cookie(tmp_path: Path, handler: PythonHandler) -> None:
    path = tmp_path / "latin.py"
    path.write_bytes("# -*- coding: latin-1 -*-\ns = 'é'\n".encode("latin-1"))

    assert "'é'" in handler.read(path)


def test_colorize_keeps_line_text(handler: PythonHandler) -> None:
    assert handler.colorize("x = 1").plain == "x = 1"


def test_default_registry_handles_python_files() -> None:
    registry = build_default_registry()

    assert registry.extensions() == (".py", ".pyi")
    assert isinstance(registry.for_path("pkg/module.py"), PythonHandler)
    assert registry.default is registry.for_path("stub.pyi")


def test_registry_rejects_unknown_extensions() -> None:
    registry = HandlerRegistry()

    with pytest.raises(UnsupportedFileTypeError):
        registry.for_path("README")
    with pytest.raises(UnsupportedFileTypeError):
        _ = registry.default


def test_normalize_extension() -> None:
    assert normalize_extension("py") == ".py"
    assert normalize_extension(".py") == ".py"
    with pytest.raises(ValueError):
        normalize_extension(" . ")


def test_write_keeps_declared_encoding(tmp_path: Path, handler: PythonHandler) -> None:
    path = tmp_path / "legacy.py"
    path.write_bytes(b"# -*- coding: latin-1 -*-\nname = 'x'\n")

    handler.write(path, "# -*- coding: latin-1 -*-\nname = '\xe9t\xe9'\n")

    assert path.read_bytes() == b"# -*- coding: latin-1 -*-\nname = '\xe9t\xe9'\n"
    assert handler.read(path) == "# -*- coding: latin-1 -*-\nname = '\xe9t\xe9'\n"


def test_write_defaults_to_utf8(tmp_path: Path, handler: PythonHandler) -> None:
    path = tmp_path / "modern.py"
    path.write_bytes(b"name = 'x'\n")

    handler.write(path, "name = '\xe9'\n")

    assert path.read_bytes() == "name = '\xe9'\n".encode()

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import io
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import Protocol

import pytest
from rich.text import Text

from pystree.errors import ParseError
from pystree.handlers.registry import HandlerRegistry, build_default_registry
from pystree.runtime.environment import RuntimeEnvironment

PARSE_FAILURE_MARKER = "!!"
GROWING_MARKER = "GROW"


@dataclass(frozen=True, slots=True)
class FakeTree:
    lines: tuple[str, ...]

    def pretty(self) -> str:
        return f"FakeTree(lines={len(self.lines)})"

    def construct_match_expression(self) -> str:
        return f"FakeTree(lines={list(self.lines)!r})"


class FakeVisitor:
    def visit(self, tree: FakeTree) -> dict[str, object]:
        return {"type": "FakeTree", "lines": list(tree.lines)}


@dataclass
class FakeHandler:
    """Handler whose format strips trailing whitespace from every line.

    Sources containing ``!!`` fail to parse at the marker's position. Sources
    containing ``GROW`` gain another line each time they are formatted.
    """

    name: str = "fake"
    reads: list[Path] = field(default_factory=list)
    writes: list[Path] = field(default_factory=list)
    widths: list[int] = field(default_factory=list)
    _lock: Lock = field(default_factory=Lock)

    def read(self, path: Path) -> str:
        with self._lock:
            self.reads.append(path)
        return path.read_text(encoding="utf-8")

    def write(self, path: Path, text: str) -> None:
        with self._lock:
            self.writes.append(path)
        path.write_text(text, encoding="utf-8")

    def parse(self, source: str) -> FakeTree:
        for index, line in enumerate(source.splitlines(), start=1):
            column = line.find(PARSE_FAILURE_MARKER)
            if column != -1:
                raise ParseError("unexpected marker", line=index, column=column)
        return FakeTree(tuple(source.splitlines()))

    def format(self, source: str, print_width: int) -> str:
        self.parse(source)
        with self._lock:
            self.widths.append(print_width)
        lines = [line.rstrip() for line in source.splitlines()]
        if GROWING_MARKER in source:
            lines.append(GROWING_MARKER)
        return "\n".join(lines) + "\n" if lines else ""

    def doc_groups(self, source: str, print_width: int) -> Sequence[object]:
        return [("group", line) for line in source.splitlines()]

    def json_visitor(self) -> FakeVisitor:
        return FakeVisitor()

    def colorize(self, line: str) -> Text:
        return Text(line)


class EnvironmentFactory(Protocol):
    def __call__(
        self,
        *,
        stdin_text: str = "",
        stdin_is_tty: bool = True,
        cpu_count: int = 4,
        handlers: HandlerRegistry | None = None,
    ) -> RuntimeEnvironment: ...


@pytest.fixture
def fake_handler() -> FakeHandler:
    return FakeHandler()


@pytest.fixture
def fake_registry(fake_handler: FakeHandler) -> HandlerRegistry:
    registry = HandlerRegistry(default_extension=".fake")
    registry.register(".fake", fake_handler)
    return registry


@pytest.fixture
def make_environment(tmp_path: Path) -> EnvironmentFactory:
    """Return a factory building environments rooted at ``tmp_path`` with in-memory streams."""

    def _make(
        *,
        stdin_text: str = "",
        stdin_is_tty: bool = True,
        cpu_count: int = 4,
        handlers: HandlerRegistry | None = None,
    ) -> RuntimeEnvironment:
        return RuntimeEnvironment(
            cwd=tmp_path,
            stdin=io.StringIO(stdin_text),
            stdout=io.StringIO(),
            stderr=io.StringIO(),
            stdin_is_tty=stdin_is_tty,
            cpu_count=cpu_count,
            color=False,
            handlers=handlers if handlers is not None else build_default_registry(),
        )

    return _make


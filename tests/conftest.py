"""Shared pytest fixtures: hand-built syntax trees over real source text."""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

import pytest

from jsxwrap.model import Node, Position, SourceLocation, Token
from jsxwrap.sourcecode import SourceCode

_TOKEN_PATTERN: re.Pattern[str] = re.compile(r"\w+|[^\w\s]")


class TreeBuilder:
    """Builds nodes whose ranges point at fragments of ``text``.

    Tokens are words and single punctuation characters, which is enough for
    the neighbor lookups the rule performs.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.source = SourceCode(
            text,
            [Token(value=m.group(), range=(m.start(), m.end())) for m in _TOKEN_PATTERN.finditer(text)],
        )

    def span(self, fragment: str, occurrence: int = 0) -> tuple[tuple[int, int], SourceLocation]:
        start = -1
        for _ in range(occurrence + 1):
            start = self.text.index(fragment, start + 1)
        end = start + len(fragment)
        return (start, end), SourceLocation(start=self._position(start), end=self._position(end))

    def node(self, cls: type[Node], fragment: str, occurrence: int = 0, **fields: object) -> Node:
        text_range, loc = self.span(fragment, occurrence)
        return cls(text_range, loc, **fields)

    def _position(self, offset: int) -> Position:
        line = self.text.count("\n", 0, offset) + 1
        column = offset - (self.text.rfind("\n", 0, offset) + 1)
        return Position(line=line, column=column)


@pytest.fixture
def tree_builder() -> Callable[[str], TreeBuilder]:
    """Return a factory for :class:`TreeBuilder` instances."""
    return TreeBuilder


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a source file under ``tmp_path`` and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write

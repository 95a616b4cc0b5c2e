"""Core value objects for lint results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from jsxwrap.model.nodes import Node
from jsxwrap.types import JsonObject


@dataclass(frozen=True)
class Token:
    """A lexical unit of the source text."""

    value: str
    range: tuple[int, int]
    type: str = "Punctuator"


@dataclass(frozen=True)
class TextEdit:
    """Replace ``range`` of the source text with ``text``."""

    range: tuple[int, int]
    text: str


@dataclass(frozen=True)
class Violation:
    """A single rule report against one node."""

    rule_id: str
    message: str
    node: Node
    fix: TextEdit | None = None

    @property
    def line(self) -> int:
        return self.node.loc.start.line

    @property
    def column(self) -> int:
        return self.node.loc.start.column

    @property
    def end_line(self) -> int:
        return self.node.loc.end.line

    @property
    def end_column(self) -> int:
        return self.node.loc.end.column

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible mapping."""
        payload: JsonObject = {
            "rule_id": self.rule_id,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "node_type": self.node.type,
        }
        if self.fix is not None:
            payload["fix"] = {"range": list(self.fix.range), "text": self.fix.text}
        return payload


@dataclass(frozen=True)
class FileResult:
    """Lint outcome for a single file."""

    path: Path
    violations: tuple[Violation, ...] = ()
    output: str | None = None
    fixed: bool = False
    error: str | None = None
    fixes_applied: int = 0

    @property
    def fixable_count(self) -> int:
        return sum(1 for violation in self.violations if violation.fixable)


@dataclass
class RunResult:
    """Aggregate outcome across all checked files."""

    files: list[FileResult] = field(default_factory=list)

    @property
    def violation_count(self) -> int:
        return sum(len(result.violations) for result in self.files)

    @property
    def fixable_count(self) -> int:
        return sum(result.fixable_count for result in self.files)

    @property
    def error_count(self) -> int:
        return sum(1 for result in self.files if result.error is not None)

    @property
    def fixed_count(self) -> int:
        return sum(result.fixes_applied for result in self.files)

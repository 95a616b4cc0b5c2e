"""Structured validation error model for config files and rule options."""

from __future__ import annotations

from dataclasses import dataclass

from jsxwrap.types import JsonObject


@dataclass(frozen=True)
class ValidationError:
    """A single validation problem with a stable code and its location."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as ``[CODE] path: field: message (hint)``."""
        location = f"{self.path}: {self.field}" if self.field else self.path
        line = f"[{self.code}] {location}: {self.message}"
        if self.hint:
            line = f"{line} ({self.hint})"
        return line

    def to_dict(self) -> JsonObject:
        return {
            "code": self.code,
            "path": self.path,
            "field": self.field,
            "message": self.message,
            "hint": self.hint,
        }


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors deterministically by path, field, code."""
    return sorted(errors, key=lambda e: (e.path, e.field, e.code))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation errors as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))

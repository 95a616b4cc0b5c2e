"""Parsing-related exceptions."""

from __future__ import annotations

from jsxwrap.exceptions.base import JsxWrapError


class SourceParseError(JsxWrapError, ValueError):
    """Raised when a source file cannot be parsed."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

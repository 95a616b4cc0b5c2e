"""Human-readable stdout reporter for check results."""

from __future__ import annotations

from pathlib import Path

from jsxwrap.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    STATUS_CLEAN,
)
from jsxwrap.model import FileResult, RunResult


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class StdoutReporter:
    """Formats check results as ``path:line:column  message  rule`` lines."""

    def __init__(self, result: RunResult, *, color: bool = False, root: Path | None = None) -> None:
        self._result = result
        self._color = color
        self._root = root

    def render(self) -> str:
        lines: list[str] = []
        for file_result in self._result.files:
            lines.extend(self._render_file(file_result))
        lines.append(self._summary())
        return "\n".join(lines)

    def _render_file(self, file_result: FileResult) -> list[str]:
        if not file_result.violations and file_result.error is None:
            return []
        name = self._display_path(file_result.path)
        lines = [self._paint(name, ANSI_BOLD)]
        if file_result.error is not None:
            lines.append(f"  {self._paint('error', ANSI_RED)}  {file_result.error}")
        for violation in file_result.violations:
            location = f"{name}:{violation.line}:{violation.column + 1}"
            lines.append(f"  {location}  {violation.message}  {self._paint(violation.rule_id, ANSI_DIM)}")
        lines.append("")
        return lines

    def _summary(self) -> str:
        result = self._result
        parts: list[str] = []
        if result.fixed_count:
            parts.append(self._paint(f"Fixed {_plural(result.fixed_count, 'problem')}.", ANSI_GREEN))
        if result.error_count:
            parts.append(self._paint(f"{_plural(result.error_count, 'file')} could not be checked.", ANSI_RED))
        if result.violation_count:
            summary = f"{_plural(result.violation_count, 'problem')} ({result.fixable_count} fixable)"
            parts.append(self._paint(summary, ANSI_YELLOW))
        elif not result.error_count:
            parts.append(self._paint(STATUS_CLEAN, ANSI_GREEN))
        return " ".join(parts)

    def _display_path(self, path: Path) -> str:
        if self._root is not None:
            for base in (self._root, self._root.resolve()):
                try:
                    return path.relative_to(base).as_posix()
                except ValueError:
                    continue
        return path.as_posix()

    def _paint(self, text: str, color: str) -> str:
        if not self._color:
            return text
        return f"{color}{text}{ANSI_RESET}"

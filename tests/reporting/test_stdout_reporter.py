"""Tests for the stdout reporter."""

from __future__ import annotations

from pathlib import Path

from jsxwrap.constants.reporting import ANSI_RESET, STATUS_CLEAN
from jsxwrap.engine import lint_source
from jsxwrap.model import FileResult, RunResult
from jsxwrap.reporting import StdoutReporter


def _result(tmp_path: Path) -> RunResult:
    violations = tuple(lint_source("const x = <div>\n</div>;\n"))
    return RunResult(
        files=[
            FileResult(path=tmp_path / "src" / "App.jsx", violations=violations),
            FileResult(path=tmp_path / "src" / "Ok.jsx"),
        ]
    )


def test_render_lists_violations_relative_to_root(tmp_path: Path) -> None:
    output = StdoutReporter(_result(tmp_path), root=tmp_path).render()

    assert "src/App.jsx:1:11  Missing parentheses around multilines JSX  jsx-wrap-multilines" in output
    assert "Ok.jsx" not in output
    assert output.splitlines()[-1] == "1 problem (1 fixable)"


def test_render_clean_run(tmp_path: Path) -> None:
    output = StdoutReporter(RunResult(files=[FileResult(path=tmp_path / "a.jsx")])).render()

    assert output == STATUS_CLEAN


def test_render_errors_and_color(tmp_path: Path) -> None:
    result = RunResult(files=[FileResult(path=tmp_path / "bad.jsx", error="parse error: boom")])

    plain = StdoutReporter(result).render()
    colored = StdoutReporter(result, color=True).render()

    assert "parse error: boom" in plain
    assert "1 file could not be checked." in plain
    assert ANSI_RESET not in plain
    assert ANSI_RESET in colored

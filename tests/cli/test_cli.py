"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from jsxwrap.cli.main import build_parser, main

UNWRAPPED = "const x = <div>\n  hi\n</div>;\n"


def test_build_parser_check_defaults() -> None:
    args = build_parser().parse_args(["check"])

    assert args.command == "check"
    assert args.paths == [Path(".")]
    assert args.fix is False
    assert args.format == "text"


def test_build_parser_check_flags(tmp_path: Path) -> None:
    args = build_parser().parse_args(
        ["check", str(tmp_path), "--fix", "--format", "json", "-c", str(tmp_path / "c.yaml"), "-r", str(tmp_path)]
    )

    assert args.paths == [tmp_path]
    assert args.fix is True
    assert args.format == "json"
    assert args.config == tmp_path / "c.yaml"
    assert args.root == tmp_path


def test_main_returns_one_when_violations_found(tmp_path: Path, write_source, capsys: pytest.CaptureFixture[str]) -> None:
    write_source("App.jsx", UNWRAPPED)

    code = main(["check", str(tmp_path), "--root", str(tmp_path), "--no-color"])

    assert code == 1
    assert "Missing parentheses around multilines JSX" in capsys.readouterr().out


def test_main_fix_returns_zero_and_rewrites(tmp_path: Path, write_source) -> None:
    path = write_source("App.jsx", UNWRAPPED)

    code = main(["check", str(tmp_path), "--root", str(tmp_path), "--fix"])

    assert code == 0
    assert path.read_text(encoding="utf-8") == "const x = (<div>\n  hi\n</div>);\n"


def test_main_json_output(tmp_path: Path, write_source, capsys: pytest.CaptureFixture[str]) -> None:
    write_source("App.jsx", UNWRAPPED)

    main(["check", str(tmp_path), "--root", str(tmp_path), "--format", "json"])
    payload = json.loads(capsys.readouterr().out)

    assert len(payload) == 1
    assert payload[0]["violations"][0]["line"] == 1
    assert payload[0]["violations"][0]["fix"]["text"] == "(<div>\n  hi\n</div>)"


def test_main_uses_config_options(tmp_path: Path, write_source) -> None:
    write_source("App.jsx", UNWRAPPED)
    write_source("jsxwrap.yaml", "options:\n  declaration: false\n")

    assert main(["check", str(tmp_path), "--root", str(tmp_path)]) == 0


def test_main_invalid_config_returns_two(tmp_path: Path, write_source, capsys: pytest.CaptureFixture[str]) -> None:
    write_source("jsxwrap.yaml", "options:\n  declarations: false\n")

    code = main(["check", str(tmp_path), "--root", str(tmp_path)])

    assert code == 2
    assert "CFG004" in capsys.readouterr().err


def test_validate_config_ok(tmp_path: Path, write_source, capsys: pytest.CaptureFixture[str]) -> None:
    write_source("jsxwrap.yaml", "options:\n  prop: true\n")

    assert main(["validate-config", "--root", str(tmp_path)]) == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_missing_root(tmp_path: Path) -> None:
    assert main(["validate-config", "--root", str(tmp_path / "missing")]) == 2


def test_build_parser_uses_brand_name() -> None:
    parser = build_parser()

    assert parser.prog == "jsxwrap"
    assert parser.description.startswith("jsxwrap:")

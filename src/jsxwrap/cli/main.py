"""CLI entrypoint for jsxwrap."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from jsxwrap import __version__
from jsxwrap.config import load_config
from jsxwrap.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from jsxwrap.exceptions import ConfigError, JsxWrapError
from jsxwrap.exceptions.validation import format_errors
from jsxwrap.model import RunResult
from jsxwrap.reporting import StdoutReporter
from jsxwrap.scanner import run_check
from jsxwrap.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check files for multiline JSX without parentheses")
    check.add_argument("paths", nargs="*", type=Path, default=[Path(".")], help="Files or directories to check")
    check.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root holding jsxwrap.yaml")
    check.add_argument("-c", "--config", type=Path, help="Explicit config file")
    check.add_argument("--fix", action="store_true", help="Rewrite files in place with parentheses added")
    check.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json",
    )
    check.add_argument("--no-color", action="store_true", help="Disable colored output")
    check.add_argument("-v", "--verbose", action="store_true", help="Show per-file diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without checking files")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root holding jsxwrap.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "check":
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = preflight_validate(args.root, args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
        result = run_check(args.paths, config=config, fix=args.fix)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except JsxWrapError as exc:
        print(f"jsxwrap error: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(_result_payload(result), indent=2))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(result, color=use_color, root=args.root).render())

    return 1 if result.violation_count or result.error_count else 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _result_payload(result: RunResult) -> list[dict[str, object]]:
    return [
        {
            "path": file_result.path.as_posix(),
            "error": file_result.error,
            "fixed": file_result.fixed,
            "violations": [violation.to_dict() for violation in file_result.violations],
        }
        for file_result in result.files
    ]


if __name__ == "__main__":
    raise SystemExit(main())

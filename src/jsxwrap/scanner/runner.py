"""Run the lint rules over a set of files."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from pathlib import Path

from jsxwrap.config.model import JsxWrapConfig
from jsxwrap.engine.linter import lint_file
from jsxwrap.exceptions import SourceParseError
from jsxwrap.model import FileResult, RunResult
from jsxwrap.scanner.discovery import discover_all

logger = logging.getLogger(__name__)


def run_check(
    paths: Iterable[Path],
    *,
    config: JsxWrapConfig,
    fix: bool = False,
) -> RunResult:
    """Lint every discovered file under ``paths``.

    A file that cannot be read or parsed is recorded with an ``error`` and the
    run continues with the next file.
    """
    started = time.perf_counter()
    files = discover_all(paths, config.source_globs, config.exclude_dirs, config.max_file_mb)
    result = RunResult()

    for path in files:
        try:
            file_result = lint_file(path, options=config.options, fix=fix)
        except SourceParseError as exc:
            logger.warning("Cannot parse %s: %s", path, exc)
            file_result = FileResult(path=path, error=f"parse error: {exc}")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            file_result = FileResult(path=path, error=f"read error: {exc}")
        result.files.append(file_result)

    logger.debug(
        "Checked %d file(s) in %.3fs: %d violation(s)",
        len(files),
        time.perf_counter() - started,
        result.violation_count,
    )
    return result

"""Lint and fix entry points for source text and files."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeAlias
from pathlib import Path

from jsxwrap.config.model import WrapOptions
from jsxwrap.config.schema import check_options
from jsxwrap.constants.config import MAX_FIX_PASSES
from jsxwrap.engine.context import RuleContext
from jsxwrap.engine.fixer import apply_fixes
from jsxwrap.engine.traversal import traverse
from jsxwrap.model import FileResult, Node, Violation
from jsxwrap.parsers.javascript import parse_javascript
from jsxwrap.rules import RULE_CLASSES, Rule
from jsxwrap.sourcecode import SourceCode

logger = logging.getLogger(__name__)

OptionsInput: TypeAlias = WrapOptions | Mapping[str, object] | None


@dataclass(frozen=True)
class FixOutcome:
    """Result of repeatedly fixing one source text."""

    output: str
    applied: int
    remaining: tuple[Violation, ...]
    passes: int


def _coerce_options(options: OptionsInput) -> WrapOptions:
    if isinstance(options, WrapOptions):
        return options
    return check_options(options)


def lint_tree(
    root: Node,
    source: SourceCode,
    *,
    options: OptionsInput = None,
    rules: Iterable[type[Rule]] = RULE_CLASSES,
    filename: str = "<input>",
) -> list[Violation]:
    """Run ``rules`` over an already parsed tree and return sorted violations."""
    resolved = _coerce_options(options)
    contexts: list[RuleContext] = []
    instances: list[Rule] = []
    for rule_class in rules:
        context = RuleContext(source, resolved, rule_id=rule_class.rule_id, filename=filename)
        contexts.append(context)
        instances.append(rule_class(context))

    traverse(root, instances)

    violations = [violation for context in contexts for violation in context.violations]
    return sorted(violations, key=lambda v: (v.line, v.column, v.rule_id))


def lint_source(
    text: str,
    *,
    options: OptionsInput = None,
    filename: str = "<input>",
) -> list[Violation]:
    """Parse ``text`` as JavaScript with JSX and lint it."""
    parsed = parse_javascript(text)
    source = SourceCode(parsed.text, parsed.tokens)
    return lint_tree(parsed.program, source, options=options, filename=filename)


def fix_source(
    text: str,
    *,
    options: OptionsInput = None,
    filename: str = "<input>",
    max_passes: int = MAX_FIX_PASSES,
) -> FixOutcome:
    """Lint and apply fixes until nothing fixable remains or ``max_passes`` is hit.

    Overlapping fixes (nested JSX) are deferred to the next pass.
    """
    resolved = _coerce_options(options)
    output = text
    applied_total = 0
    passes = 0
    violations = lint_source(output, options=resolved, filename=filename)

    while passes < max_passes:
        edits = [violation.fix for violation in violations if violation.fix is not None]
        if not edits:
            break
        output, applied = apply_fixes(output, edits)
        passes += 1
        applied_total += applied
        logger.debug("%s: pass %d applied %d fix(es)", filename, passes, applied)
        violations = lint_source(output, options=resolved, filename=filename)
        if applied == 0:
            break

    return FixOutcome(output=output, applied=applied_total, remaining=tuple(violations), passes=passes)


def lint_file(path: Path, *, options: OptionsInput = None, fix: bool = False) -> FileResult:
    """Lint one file, optionally writing fixes back to disk."""
    text = path.read_text(encoding="utf-8")
    if not fix:
        violations = lint_source(text, options=options, filename=str(path))
        return FileResult(path=path, violations=tuple(violations))

    outcome = fix_source(text, options=options, filename=str(path))
    changed = outcome.output != text
    if changed:
        path.write_text(outcome.output, encoding="utf-8")
        logger.debug("Wrote %d fix(es) to %s", outcome.applied, path)
    return FileResult(
        path=path,
        violations=outcome.remaining,
        output=outcome.output,
        fixed=changed,
        fixes_applied=outcome.applied,
    )

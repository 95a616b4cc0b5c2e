"""Traversal, reporting and fix application for lint rules."""

from .context import RuleContext
from .fixer import Fixer, apply_fixes
from .linter import FixOutcome, fix_source, lint_file, lint_source, lint_tree
from .traversal import traverse

__all__ = [
    "FixOutcome",
    "Fixer",
    "RuleContext",
    "apply_fixes",
    "fix_source",
    "lint_file",
    "lint_source",
    "lint_tree",
    "traverse",
]

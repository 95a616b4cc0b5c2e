"""Per-file, per-rule state handed to rules during traversal."""

from __future__ import annotations

from collections.abc import Callable

from jsxwrap.config.model import WrapOptions
from jsxwrap.engine.fixer import Fixer
from jsxwrap.model import Node, TextEdit, Violation
from jsxwrap.sourcecode import SourceCode


class RuleContext:
    """Gives a rule read access to the file and a sink for its reports."""

    def __init__(
        self,
        source: SourceCode,
        options: WrapOptions | None = None,
        *,
        rule_id: str = "",
        filename: str = "<input>",
    ) -> None:
        self.source = source
        self.options = options if options is not None else WrapOptions()
        self.rule_id = rule_id
        self.filename = filename
        self.violations: list[Violation] = []

    def report(
        self,
        *,
        node: Node,
        message: str,
        fix: Callable[[Fixer], TextEdit] | None = None,
    ) -> None:
        """Record a violation, materializing its fix if one is given."""
        edit = fix(Fixer()) if fix is not None else None
        self.violations.append(Violation(rule_id=self.rule_id, message=message, node=node, fix=edit))

"""Flag multiline JSX elements that are not wrapped in parentheses.

The rule watches seven positions where a JSX element commonly appears as a
value. Each position is switched on or off through ``WrapOptions``:

=====================  ===========  =========================================
Event                  Context      Checked expression
=====================  ===========  =========================================
VariableDeclarator     declaration  ``init``
AssignmentExpression   assignment   ``right``
ReturnStatement        return       ``argument``
ArrowFunction (exit)   arrow        ``body`` when it is not a block
ConditionalExpression  condition    ``consequent`` and ``alternate``
LogicalExpression      logical      ``right``
JSXAttribute           prop         ``value.expression`` for ``{...}`` values
=====================  ===========  =========================================

When ``condition`` is off, a conditional sitting directly in a declaration or
assignment still has its two branches checked under that outer context.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from jsxwrap.config.model import WrapOptions
from jsxwrap.constants.rule import CLOSE_PAREN, OPEN_PAREN, RULE_ID, RULE_MESSAGE
from jsxwrap.model import (
    ArrowFunctionExpression,
    AssignmentExpression,
    BlockStatement,
    ConditionalExpression,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    LogicalExpression,
    Node,
    ReturnStatement,
    TextEdit,
    VariableDeclarator,
)
from jsxwrap.rules.base import Rule
from jsxwrap.sourcecode import SourceCode
from jsxwrap.types import ContextName

if TYPE_CHECKING:
    from jsxwrap.engine.fixer import Fixer

FixFunction: TypeAlias = Callable[["Fixer"], TextEdit]

CONTEXT_BY_NODE: dict[type[Node], ContextName] = {
    VariableDeclarator: "declaration",
    AssignmentExpression: "assignment",
    ReturnStatement: "return",
    ArrowFunctionExpression: "arrow",
    ConditionalExpression: "condition",
    LogicalExpression: "logical",
    JSXAttribute: "prop",
}


def _value_candidates(value: Node | None, options: WrapOptions) -> tuple[Node | None, ...]:
    if isinstance(value, ConditionalExpression) and not options.is_enabled("condition"):
        return (value.consequent, value.alternate)
    return (value,)


def candidates_for(node: Node, options: WrapOptions) -> tuple[Node | None, ...]:
    """Return the expressions to check for an event on ``node``.

    Entries may be ``None`` or non-JSX nodes; callers skip those.
    """
    if isinstance(node, VariableDeclarator):
        return _value_candidates(node.init, options)
    if isinstance(node, AssignmentExpression):
        return _value_candidates(node.right, options)
    if isinstance(node, ReturnStatement):
        return (node.argument,)
    if isinstance(node, ArrowFunctionExpression):
        if node.body is None or isinstance(node.body, BlockStatement):
            return ()
        return (node.body,)
    if isinstance(node, ConditionalExpression):
        return (node.consequent, node.alternate)
    if isinstance(node, LogicalExpression):
        return (node.right,)
    if isinstance(node, JSXAttribute):
        if isinstance(node.value, JSXExpressionContainer):
            return (node.value.expression,)
        return ()
    raise TypeError(f"no candidate mapping for {node.type} nodes")


def is_multiline(node: Node) -> bool:
    return node.loc.start.line != node.loc.end.line


def is_parenthesised(node: Node, source: SourceCode) -> bool:
    """Return True when ``(`` directly precedes and ``)`` directly follows ``node``."""
    previous_token = source.get_token_before(node)
    next_token = source.get_token_after(node)
    if previous_token is None or next_token is None:
        return False
    return (
        previous_token.value == OPEN_PAREN
        and previous_token.range[1] <= node.range[0]
        and next_token.value == CLOSE_PAREN
        and next_token.range[0] >= node.range[1]
    )


def should_flag(node: Node | None, source: SourceCode) -> bool:
    """Return True for a multiline JSX element that is not parenthesised."""
    if not isinstance(node, JSXElement):
        return False
    if not is_multiline(node):
        return False
    return not is_parenthesised(node, source)


def wrap_fix(node: Node, source: SourceCode) -> FixFunction:
    """Build a deferred fix that wraps ``node`` in one pair of parentheses."""

    def fix(fixer: Fixer) -> TextEdit:
        return fixer.replace_text(node, f"{OPEN_PAREN}{source.get_text(node)}{CLOSE_PAREN}")

    return fix


class WrapMultilinesRule(Rule):
    """Require parentheses around multiline JSX."""

    rule_id = RULE_ID
    message = RULE_MESSAGE

    def visit_VariableDeclarator(self, node: Node) -> None:
        self._check_position(node)

    def visit_AssignmentExpression(self, node: Node) -> None:
        self._check_position(node)

    def visit_ReturnStatement(self, node: Node) -> None:
        self._check_position(node)

    def leave_ArrowFunctionExpression(self, node: Node) -> None:
        self._check_position(node)

    def visit_ConditionalExpression(self, node: Node) -> None:
        self._check_position(node)

    def visit_LogicalExpression(self, node: Node) -> None:
        self._check_position(node)

    def visit_JSXAttribute(self, node: Node) -> None:
        self._check_position(node)

    def _check_position(self, node: Node) -> None:
        if not self.options.is_enabled(CONTEXT_BY_NODE[type(node)]):
            return
        for candidate in candidates_for(node, self.options):
            self._check(candidate)

    def _check(self, node: Node | None) -> None:
        if node is None or not should_flag(node, self.source):
            return
        self.context.report(node=node, message=self.message, fix=wrap_fix(node, self.source))

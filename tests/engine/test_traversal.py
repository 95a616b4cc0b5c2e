"""Tests for the enter/exit traversal driver."""

from __future__ import annotations

import pytest

from jsxwrap.config import WrapOptions
from jsxwrap.engine import RuleContext, traverse
from jsxwrap.model import ArrowFunctionExpression, JSXElement, Node, OpaqueNode, Program
from jsxwrap.rules import Rule


class _RecordingRule(Rule):
    rule_id = "recording-rule"
    message = "recorded"

    def __init__(self, context: RuleContext) -> None:
        super().__init__(context)
        self.events: list[str] = []

    def visit_ArrowFunctionExpression(self, node: Node) -> None:
        self.events.append("enter arrow")

    def leave_ArrowFunctionExpression(self, node: Node) -> None:
        self.events.append("exit arrow")

    def visit_JSXElement(self, node: Node) -> None:
        self.events.append(f"enter {node.name}")  # type: ignore[attr-defined]


def test_exit_hook_runs_after_children(tree_builder) -> None:
    builder = tree_builder("() => <a>{<b />}</a>")
    inner = builder.node(JSXElement, "<b />", name="b")
    outer = builder.node(JSXElement, "<a>{<b />}</a>", name="a", children=(inner,))
    arrow = builder.node(ArrowFunctionExpression, builder.text, body=outer)
    program = builder.node(Program, builder.text, body=(arrow,))
    rule = _RecordingRule(RuleContext(builder.source, WrapOptions()))

    traverse(program, [rule])

    assert rule.events == ["enter arrow", "enter a", "enter b", "exit arrow"]


def test_traversal_visits_children_of_opaque_nodes(tree_builder) -> None:
    builder = tree_builder("f(<a />, <b />)")
    call = builder.node(
        OpaqueNode,
        builder.text,
        kind="CallExpression",
        children=(builder.node(JSXElement, "<a />", name="a"), builder.node(JSXElement, "<b />", name="b")),
    )
    rule = _RecordingRule(RuleContext(builder.source, WrapOptions()))

    traverse(builder.node(Program, builder.text, body=(call,)), [rule])

    assert rule.events == ["enter a", "enter b"]


def test_rule_with_unknown_hook_is_rejected() -> None:
    with pytest.raises(TypeError, match="unknown node type"):

        class _BadRule(Rule):
            rule_id = "bad-rule"
            message = "bad"

            def visit_JsxElement(self, node: Node) -> None:
                pass


def test_rule_id_must_be_kebab_case() -> None:
    with pytest.raises(TypeError, match="kebab-case"):

        class _BadRule(Rule):
            rule_id = "BAD_RULE"
            message = "bad"

"""Depth-first traversal that delivers enter and exit events to rules."""

from __future__ import annotations

from collections.abc import Iterable

from jsxwrap.model import Node
from jsxwrap.rules.base import Handler, Rule
from jsxwrap.types import EventName


def traverse(root: Node, rules: Iterable[Rule]) -> None:
    """Walk ``root`` in source order, calling each rule's hooks.

    Enter hooks run before a node's children are visited, exit hooks after.
    Rules are called in the order given for each event.
    """
    table: dict[tuple[EventName, str], list[Handler]] = {}
    for rule in rules:
        for key, handler in rule.handlers().items():
            table.setdefault(key, []).append(handler)
    if not table:
        return

    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            for handler in table.get(("exit", node.type), ()):
                handler(node)
            continue

        for handler in table.get(("enter", node.type), ()):
            handler(node)
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(tuple(node.child_nodes())))

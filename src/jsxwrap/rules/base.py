"""Rule interface: an explicit visitor over the syntax tree."""

from __future__ import annotations

import inspect
import re
from abc import ABC
from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from jsxwrap.model import Node
from jsxwrap.model.nodes import NODE_CLASSES
from jsxwrap.types import EventName

if TYPE_CHECKING:
    from jsxwrap.config.model import WrapOptions
    from jsxwrap.engine.context import RuleContext
    from jsxwrap.sourcecode import SourceCode

_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")

_KNOWN_NODE_TYPES: frozenset[str] = frozenset(cls.type for cls in NODE_CLASSES)

_HOOK_PREFIXES: dict[str, EventName] = {"visit_": "enter", "leave_": "exit"}

Handler: TypeAlias = Callable[[Node], None]


class Rule(ABC):
    """Abstract base class for lint rules.

    Subclasses declare ``visit_<NodeType>`` methods, called when the traversal
    enters a node of that type, and ``leave_<NodeType>`` methods, called once
    all of the node's children have been visited.
    """

    rule_id: ClassVar[str]
    message: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate ``rule_id``, ``message`` and hook names on concrete subclasses."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        rule_id = getattr(cls, "rule_id", None)
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `rule_id`")
        if not _RULE_ID_PATTERN.match(rule_id):
            raise TypeError(f"{cls.__name__}.rule_id must be kebab-case (got {rule_id!r})")

        message = getattr(cls, "message", None)
        if not isinstance(message, str) or not message.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `message`")

        for name, _ in _iter_hooks(cls):
            if name not in _KNOWN_NODE_TYPES:
                raise TypeError(f"{cls.__name__} has a hook for unknown node type {name!r}")

    def __init__(self, context: RuleContext) -> None:
        self.context = context

    @property
    def source(self) -> SourceCode:
        return self.context.source

    @property
    def options(self) -> WrapOptions:
        return self.context.options

    def handlers(self) -> dict[tuple[EventName, str], Handler]:
        """Return bound hooks keyed by ``(event, node type)``."""
        table: dict[tuple[EventName, str], Handler] = {}
        for node_type, attr in _iter_hooks(type(self)):
            prefix = attr[: attr.index("_") + 1]
            table[(_HOOK_PREFIXES[prefix], node_type)] = getattr(self, attr)
        return table


def _iter_hooks(cls: type) -> list[tuple[str, str]]:
    """Return ``(node type, attribute name)`` for every hook method on ``cls``."""
    hooks: list[tuple[str, str]] = []
    for attr in sorted(dir(cls)):
        for prefix in _HOOK_PREFIXES:
            if attr.startswith(prefix) and callable(getattr(cls, attr)):
                hooks.append((attr[len(prefix) :], attr))
    return hooks

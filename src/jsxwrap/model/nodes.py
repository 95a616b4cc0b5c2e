"""Syntax tree node model consumed by lint rules.

Nodes are frozen, read-only views built by a parser adapter. The classes form a
closed union: the kinds rules dispatch on each have a dedicated class, and
everything else is an :class:`OpaqueNode` that only exposes its children.
Field names follow ESTree so rule code reads like the AST it inspects.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Position:
    """A 1-based line and 0-based column."""

    line: int
    column: int


@dataclass(frozen=True)
class SourceLocation:
    """Start and end positions of a node."""

    start: Position
    end: Position


@dataclass(frozen=True)
class Node:
    """Base class for all syntax tree nodes."""

    type: ClassVar[str] = "Node"

    range: tuple[int, int]
    loc: SourceLocation

    def child_nodes(self) -> Iterator[Node]:
        """Yield direct children in source order."""
        return iter(())


def _present(*nodes: Node | None) -> Iterator[Node]:
    return (node for node in nodes if node is not None)


@dataclass(frozen=True)
class OpaqueNode(Node):
    """Any node kind rules do not dispatch on."""

    kind: str = "Unknown"
    children: tuple[Node, ...] = ()

    @property
    def type(self) -> str:  # type: ignore[override]
        return self.kind

    def child_nodes(self) -> Iterator[Node]:
        return iter(self.children)


@dataclass(frozen=True)
class Program(Node):
    type: ClassVar[str] = "Program"

    body: tuple[Node, ...] = ()

    def child_nodes(self) -> Iterator[Node]:
        return iter(self.body)


@dataclass(frozen=True)
class BlockStatement(Node):
    type: ClassVar[str] = "BlockStatement"

    body: tuple[Node, ...] = ()

    def child_nodes(self) -> Iterator[Node]:
        return iter(self.body)


@dataclass(frozen=True)
class VariableDeclarator(Node):
    """``id = init`` inside a ``const``/``let``/``var`` declaration."""

    type: ClassVar[str] = "VariableDeclarator"

    id: Node | None = None
    init: Node | None = None

    def child_nodes(self) -> Iterator[Node]:
        return _present(self.id, self.init)


@dataclass(frozen=True)
class AssignmentExpression(Node):
    type: ClassVar[str] = "AssignmentExpression"

    left: Node | None = None
    right: Node | None = None
    operator: str = "="

    def child_nodes(self) -> Iterator[Node]:
        return _present(self.left, self.right)


@dataclass(frozen=True)
class ReturnStatement(Node):
    type: ClassVar[str] = "ReturnStatement"

    argument: Node | None = None

    def child_nodes(self) -> Iterator[Node]:
        return _present(self.argument)


@dataclass(frozen=True)
class ArrowFunctionExpression(Node):
    """Arrow function; ``body`` is a block or an implicit-return expression."""

    type: ClassVar[str] = "ArrowFunctionExpression"

    params: tuple[Node, ...] = ()
    body: Node | None = None

    def child_nodes(self) -> Iterator[Node]:
        yield from self.params
        yield from _present(self.body)


@dataclass(frozen=True)
class ConditionalExpression(Node):
    """``test ? consequent : alternate``."""

    type: ClassVar[str] = "ConditionalExpression"

    test: Node | None = None
    consequent: Node | None = None
    alternate: Node | None = None

    def child_nodes(self) -> Iterator[Node]:
        return _present(self.test, self.consequent, self.alternate)


@dataclass(frozen=True)
class LogicalExpression(Node):
    """``left && right``, ``left || right`` or ``left ?? right``."""

    type: ClassVar[str] = "LogicalExpression"

    left: Node | None = None
    right: Node | None = None
    operator: str = "&&"

    def child_nodes(self) -> Iterator[Node]:
        return _present(self.left, self.right)


@dataclass(frozen=True)
class JSXElement(Node):
    """A JSX element, paired (``<a>...</a>``) or self-closing (``<a />``)."""

    type: ClassVar[str] = "JSXElement"

    name: str = ""
    children: tuple[Node, ...] = ()

    def child_nodes(self) -> Iterator[Node]:
        return iter(self.children)


@dataclass(frozen=True)
class JSXFragment(Node):
    """A ``<>...</>`` fragment. Not a JSX element."""

    type: ClassVar[str] = "JSXFragment"

    children: tuple[Node, ...] = ()

    def child_nodes(self) -> Iterator[Node]:
        return iter(self.children)


@dataclass(frozen=True)
class JSXExpressionContainer(Node):
    """``{expression}`` inside JSX; ``expression`` is None for ``{}``."""

    type: ClassVar[str] = "JSXExpressionContainer"

    expression: Node | None = None

    def child_nodes(self) -> Iterator[Node]:
        return _present(self.expression)


@dataclass(frozen=True)
class JSXAttribute(Node):
    """``name=value`` on a JSX opening element; ``value`` is None for bare flags."""

    type: ClassVar[str] = "JSXAttribute"

    name: Node | None = None
    value: Node | None = None

    def child_nodes(self) -> Iterator[Node]:
        return _present(self.name, self.value)


NODE_CLASSES: tuple[type[Node], ...] = (
    Program,
    BlockStatement,
    VariableDeclarator,
    AssignmentExpression,
    ReturnStatement,
    ArrowFunctionExpression,
    ConditionalExpression,
    LogicalExpression,
    JSXElement,
    JSXFragment,
    JSXExpressionContainer,
    JSXAttribute,
)


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all descendants in depth-first source order."""
    yield node
    for child in node.child_nodes():
        yield from walk(child)

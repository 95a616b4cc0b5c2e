"""JavaScript/JSX parser adapter built on tree-sitter.

Converts a tree-sitter concrete syntax tree into the ESTree-shaped node model
and a flat token stream. Grouping parentheses are dropped from the tree, as in
ESTree: ``(<a />)`` yields the ``JSXElement`` itself, and the two parentheses
survive only as tokens around it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import tree_sitter_javascript
from tree_sitter import Language, Parser
from tree_sitter import Node as TSNode

from jsxwrap.constants.parsing import (
    ASSIGNMENT_KINDS,
    ATOMIC_TOKEN_KINDS,
    JSX_ELEMENT_KINDS,
    LOGICAL_OPERATORS,
    PARENTHESIZED_KIND,
    SKIPPED_TOKEN_KINDS,
)
from jsxwrap.exceptions import SourceParseError
from jsxwrap.model import (
    ArrowFunctionExpression,
    AssignmentExpression,
    BlockStatement,
    ConditionalExpression,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXFragment,
    LogicalExpression,
    Node,
    OpaqueNode,
    Position,
    Program,
    ReturnStatement,
    SourceLocation,
    Token,
    VariableDeclarator,
)

logger = logging.getLogger(__name__)

JAVASCRIPT: Language = Language(tree_sitter_javascript.language())


@dataclass(frozen=True)
class ParsedSource:
    """Result of parsing one file."""

    text: str
    program: Program
    tokens: tuple[Token, ...]


def parse_javascript(text: str) -> ParsedSource:
    """Parse JavaScript with JSX and return the program node and tokens.

    Raises ``SourceParseError`` when the source contains syntax errors.
    """
    data = text.encode("utf-8")
    tree = Parser(JAVASCRIPT).parse(data)
    root = tree.root_node
    if root.has_error:
        line, column = _first_error_point(root)
        raise SourceParseError(f"Syntax error at line {line}, column {column}", line=line, column=column)

    converter = _TreeConverter(text, data)
    program = converter.convert(root)
    if not isinstance(program, Program):
        raise SourceParseError(f"Unexpected root node type {root.type!r}")
    tokens = tuple(converter.tokens(root))
    logger.debug("Parsed %d bytes into %d tokens", len(data), len(tokens))
    return ParsedSource(text=text, program=program, tokens=tokens)


def _first_error_point(root: TSNode) -> tuple[int, int]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node.start_point[0] + 1, node.start_point[1]
        stack.extend(reversed([child for child in node.children if child.has_error or child.is_missing]))
    return root.start_point[0] + 1, root.start_point[1]


class _TreeConverter:
    """Maps tree-sitter nodes onto the node model for one source text."""

    def __init__(self, text: str, data: bytes) -> None:
        self._text = text
        self._char_at = _byte_to_char_table(text, data)
        self._line_starts = [0]
        for index, char in enumerate(text):
            if char == "\n":
                self._line_starts.append(index + 1)

    def convert(self, node: TSNode) -> Node:
        kind = node.type
        if kind == PARENTHESIZED_KIND:
            inner = self._named(node)
            if len(inner) == 1:
                return self.convert(inner[0])
            return self._opaque(node)

        span = self._span(node)
        if kind == "program":
            return Program(*span, body=self._convert_all(self._named(node)))
        if kind == "statement_block":
            return BlockStatement(*span, body=self._convert_all(self._named(node)))
        if kind == "variable_declarator":
            return VariableDeclarator(
                *span,
                id=self._field(node, "name"),
                init=self._field(node, "value"),
            )
        if kind in ASSIGNMENT_KINDS:
            operator = node.child_by_field_name("operator")
            return AssignmentExpression(
                *span,
                left=self._field(node, "left"),
                right=self._field(node, "right"),
                operator=self._text_of(operator) if operator is not None else "=",
            )
        if kind == "return_statement":
            named = self._named(node)
            return ReturnStatement(*span, argument=self.convert(named[0]) if named else None)
        if kind == "arrow_function":
            params = node.child_by_field_name("parameters") or node.child_by_field_name("parameter")
            return ArrowFunctionExpression(
                *span,
                params=(self.convert(params),) if params is not None else (),
                body=self._field(node, "body"),
            )
        if kind == "ternary_expression":
            return ConditionalExpression(
                *span,
                test=self._field(node, "condition"),
                consequent=self._field(node, "consequence"),
                alternate=self._field(node, "alternative"),
            )
        if kind == "binary_expression":
            operator = node.child_by_field_name("operator")
            operator_text = self._text_of(operator) if operator is not None else ""
            if operator_text in LOGICAL_OPERATORS:
                return LogicalExpression(
                    *span,
                    left=self._field(node, "left"),
                    right=self._field(node, "right"),
                    operator=operator_text,
                )
            return self._opaque(node)
        if kind in JSX_ELEMENT_KINDS:
            return self._jsx_element(node, span)
        if kind == "jsx_attribute":
            named = self._named(node)
            return JSXAttribute(
                *span,
                name=self.convert(named[0]) if named else None,
                value=self.convert(named[1]) if len(named) > 1 else None,
            )
        if kind == "jsx_expression":
            named = self._named(node)
            return JSXExpressionContainer(*span, expression=self.convert(named[0]) if named else None)
        return self._opaque(node)

    def tokens(self, root: TSNode) -> list[Token]:
        """Return the leaf tokens under ``root`` in source order, without comments."""
        found: list[Token] = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type in SKIPPED_TOKEN_KINDS or node.is_missing:
                continue
            if node.child_count == 0 or node.type in ATOMIC_TOKEN_KINDS:
                start, end = self._char_at[node.start_byte], self._char_at[node.end_byte]
                if end > start:
                    found.append(
                        Token(
                            value=self._text[start:end],
                            range=(start, end),
                            type=node.type if node.is_named else "Punctuator",
                        )
                    )
                continue
            stack.extend(reversed(node.children))
        return found

    def _jsx_element(self, node: TSNode, span: tuple[tuple[int, int], SourceLocation]) -> Node:
        children = self._convert_all(self._named(node))
        if node.type == "jsx_self_closing_element":
            name = node.child_by_field_name("name")
            return JSXElement(*span, name=self._text_of(name) if name is not None else "", children=children)

        opening = node.child_by_field_name("open_tag")
        if opening is None:
            opening = next((child for child in node.named_children if child.type == "jsx_opening_element"), None)
        name = opening.child_by_field_name("name") if opening is not None else None
        if name is None:
            return JSXFragment(*span, children=children)
        return JSXElement(*span, name=self._text_of(name), children=children)

    def _opaque(self, node: TSNode) -> OpaqueNode:
        return OpaqueNode(*self._span(node), kind=node.type, children=self._convert_all(self._named(node)))

    def _field(self, node: TSNode, name: str) -> Node | None:
        child = node.child_by_field_name(name)
        return self.convert(child) if child is not None else None

    def _convert_all(self, nodes: list[TSNode]) -> tuple[Node, ...]:
        return tuple(self.convert(node) for node in nodes)

    @staticmethod
    def _named(node: TSNode) -> list[TSNode]:
        return [child for child in node.named_children if child.type not in SKIPPED_TOKEN_KINDS]

    def _text_of(self, node: TSNode) -> str:
        return self._text[self._char_at[node.start_byte] : self._char_at[node.end_byte]]

    def _span(self, node: TSNode) -> tuple[tuple[int, int], SourceLocation]:
        start, end = self._char_at[node.start_byte], self._char_at[node.end_byte]
        start_row, end_row = node.start_point[0], node.end_point[0]
        loc = SourceLocation(
            start=Position(line=start_row + 1, column=start - self._line_starts[start_row]),
            end=Position(line=end_row + 1, column=end - self._line_starts[end_row]),
        )
        return (start, end), loc


def _byte_to_char_table(text: str, data: bytes) -> list[int] | range:
    """Map every UTF-8 byte offset of ``data`` to a character offset in ``text``."""
    if len(data) == len(text):
        return range(len(text) + 1)
    table: list[int] = []
    for index, char in enumerate(text):
        table.extend([index] * len(char.encode("utf-8")))
    table.append(len(text))
    return table

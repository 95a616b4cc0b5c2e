"""Core data models for jsxwrap."""

from .entities import FileResult, RunResult, TextEdit, Token, Violation
from .nodes import (
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
    VariableDeclarator,
    walk,
)

__all__ = [
    "ArrowFunctionExpression",
    "AssignmentExpression",
    "BlockStatement",
    "ConditionalExpression",
    "FileResult",
    "JSXAttribute",
    "JSXElement",
    "JSXExpressionContainer",
    "JSXFragment",
    "LogicalExpression",
    "Node",
    "OpaqueNode",
    "Position",
    "Program",
    "ReturnStatement",
    "RunResult",
    "SourceLocation",
    "TextEdit",
    "Token",
    "VariableDeclarator",
    "Violation",
    "walk",
]

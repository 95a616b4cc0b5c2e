"""Constants for the multiline JSX parentheses rule."""

from __future__ import annotations

from jsxwrap.types import ContextName

RULE_ID: str = "jsx-wrap-multilines"
RULE_MESSAGE: str = "Missing parentheses around multilines JSX"

CONTEXT_NAMES: tuple[ContextName, ...] = (
    "declaration",
    "assignment",
    "return",
    "arrow",
    "condition",
    "logical",
    "prop",
)

DEFAULT_CONTEXTS: dict[ContextName, bool] = {
    "declaration": True,
    "assignment": True,
    "return": True,
    "arrow": True,
    "condition": False,
    "logical": False,
    "prop": False,
}

OPEN_PAREN: str = "("
CLOSE_PAREN: str = ")"

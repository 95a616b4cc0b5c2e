"""Tree-sitter node kinds recognised by the JavaScript parser adapter."""

from __future__ import annotations

LOGICAL_OPERATORS: frozenset[str] = frozenset({"&&", "||", "??"})

ASSIGNMENT_KINDS: frozenset[str] = frozenset(
    {
        "assignment_expression",
        "augmented_assignment_expression",
    }
)

JSX_ELEMENT_KINDS: frozenset[str] = frozenset({"jsx_element", "jsx_self_closing_element"})

# Leaves of these kinds are emitted as a single token.
ATOMIC_TOKEN_KINDS: frozenset[str] = frozenset(
    {
        "string",
        "regex",
        "jsx_text",
    }
)

# Never part of the token stream.
SKIPPED_TOKEN_KINDS: frozenset[str] = frozenset({"comment", "html_comment", "hash_bang_line"})

PARENTHESIZED_KIND: str = "parenthesized_expression"

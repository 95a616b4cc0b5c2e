"""Tests for token neighbor queries."""

from __future__ import annotations

from jsxwrap.model import JSXElement, OpaqueNode


def test_token_neighbors_and_text(tree_builder) -> None:
    builder = tree_builder("f( <a /> )")
    element = builder.node(JSXElement, "<a />")

    assert builder.source.get_text(element) == "<a />"
    assert builder.source.get_token_before(element).value == "("
    assert builder.source.get_token_after(element).value == ")"


def test_no_neighbors_at_file_edges(tree_builder) -> None:
    builder = tree_builder("value")
    node = builder.node(OpaqueNode, "value", kind="Identifier")

    assert builder.source.get_token_before(node) is None
    assert builder.source.get_token_after(node) is None

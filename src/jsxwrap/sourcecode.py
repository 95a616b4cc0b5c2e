"""Read-only text and token queries over one parsed source file."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

from jsxwrap.model import Node, Token


class SourceCode:
    """Source text plus its token stream, sorted by position.

    Neighbor lookups use the token ranges only; comments are never tokens,
    so a comment between a node and a parenthesis is skipped over.
    """

    def __init__(self, text: str, tokens: Sequence[Token]) -> None:
        self.text = text
        self.tokens: tuple[Token, ...] = tuple(sorted(tokens, key=lambda token: token.range))
        self._starts = [token.range[0] for token in self.tokens]
        self._ends = [token.range[1] for token in self.tokens]

    def get_text(self, node: Node) -> str:
        """Return the exact source text covered by ``node``."""
        start, end = node.range
        return self.text[start:end]

    def get_token_before(self, node: Node) -> Token | None:
        """Return the last token ending at or before the start of ``node``."""
        index = bisect_right(self._ends, node.range[0]) - 1
        if index < 0:
            return None
        return self.tokens[index]

    def get_token_after(self, node: Node) -> Token | None:
        """Return the first token starting at or after the end of ``node``."""
        index = bisect_left(self._starts, node.range[1])
        if index >= len(self.tokens):
            return None
        return self.tokens[index]

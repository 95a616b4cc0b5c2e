"""Text edits produced by rule fixes and their application."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jsxwrap.model import Node, TextEdit

logger = logging.getLogger(__name__)


class Fixer:
    """Builds replace-range edits for rule fix callbacks."""

    def replace_text(self, node: Node, text: str) -> TextEdit:
        return self.replace_range(node.range, text)

    def replace_range(self, text_range: tuple[int, int], text: str) -> TextEdit:
        return TextEdit(range=text_range, text=text)


def apply_fixes(text: str, edits: Iterable[TextEdit]) -> tuple[str, int]:
    """Apply non-overlapping edits to ``text`` and return ``(output, applied)``.

    Edits are applied in range order. An edit that starts at or before the end
    of an already applied edit is skipped; a later lint pass picks it up again
    against the updated text.
    """
    parts: list[str] = []
    last_end: int | None = None
    applied = 0

    for edit in sorted(edits, key=lambda item: item.range):
        start, end = edit.range
        if start > end or (last_end is not None and start <= last_end):
            logger.debug("Skipping overlapping edit at %d-%d", start, end)
            continue
        parts.append(text[last_end or 0 : start])
        parts.append(edit.text)
        last_end = end
        applied += 1

    parts.append(text[last_end or 0 :])
    return "".join(parts), applied

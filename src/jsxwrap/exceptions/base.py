"""Root exception type."""

from __future__ import annotations


class JsxWrapError(Exception):
    """Base class for all errors raised by jsxwrap."""

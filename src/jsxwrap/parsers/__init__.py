"""Source parsers for jsxwrap."""

from .javascript import ParsedSource, parse_javascript

__all__ = ["ParsedSource", "parse_javascript"]

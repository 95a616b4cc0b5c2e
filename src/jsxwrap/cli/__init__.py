"""Command line interface for jsxwrap."""

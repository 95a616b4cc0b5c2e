"""Constant tables shared across jsxwrap modules."""

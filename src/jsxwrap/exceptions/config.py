"""Configuration-related exceptions."""

from __future__ import annotations

from jsxwrap.exceptions.base import JsxWrapError


class ConfigError(JsxWrapError, ValueError):
    """Raised when configuration or rule options are invalid."""

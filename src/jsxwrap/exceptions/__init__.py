"""Shared exception hierarchy for jsxwrap."""

from __future__ import annotations

from .base import JsxWrapError
from .config import ConfigError
from .parsing import SourceParseError

__all__ = [
    "ConfigError",
    "JsxWrapError",
    "SourceParseError",
]

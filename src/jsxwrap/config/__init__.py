"""Configuration loading, validation, and option resolution for jsxwrap."""

from __future__ import annotations

from jsxwrap.config.loader import load_config
from jsxwrap.config.model import JsxWrapConfig, WrapOptions, resolve_options
from jsxwrap.config.schema import OPTIONS_SCHEMA, check_options, validate_options
from jsxwrap.config.validator import validate_config_file

__all__ = [
    "OPTIONS_SCHEMA",
    "JsxWrapConfig",
    "WrapOptions",
    "check_options",
    "load_config",
    "resolve_options",
    "validate_config_file",
    "validate_options",
]

"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

from jsxwrap.constants.rule import CONTEXT_NAMES

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG007: str = "CFG007"  # value out of range
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "options",
        "source_globs",
        "exclude_dirs",
        "max_file_mb",
    }
)

ALLOWED_OPTION_KEYS: frozenset[str] = frozenset(CONTEXT_NAMES)

LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("source_globs", "exclude_dirs")

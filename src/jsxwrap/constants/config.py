"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "jsxwrap.yaml"
DEFAULT_MAX_FILE_MB: int = 2

DEFAULT_SOURCE_GLOBS: tuple[str, ...] = ("**/*.jsx", "**/*.js")
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = ("node_modules",)

# Upper bound on lint/fix rounds for a single file.
MAX_FIX_PASSES: int = 10

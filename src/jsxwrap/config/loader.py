"""Config loading and normalization for jsxwrap."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from jsxwrap.config.model import JsxWrapConfig, resolve_options
from jsxwrap.config.schema import validate_options
from jsxwrap.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_SOURCE_GLOBS,
)
from jsxwrap.constants.validation import ALLOWED_CONFIG_KEYS
from jsxwrap.exceptions import ConfigError
from jsxwrap.exceptions.validation import format_errors


def load_config(root: Path, config_path: Path | None = None) -> JsxWrapConfig:
    """Load and validate config from ``jsxwrap.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return JsxWrapConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    options_raw = raw.get("options")
    option_errors = validate_options(options_raw, path=str(path))
    if option_errors:
        raise ConfigError(format_errors(option_errors))

    max_file_mb = raw.get("max_file_mb", DEFAULT_MAX_FILE_MB)
    if isinstance(max_file_mb, bool) or not isinstance(max_file_mb, int) or max_file_mb <= 0:
        raise ConfigError("max_file_mb must be a positive integer")

    source_globs = tuple(_ensure_string_list(raw.get("source_globs", list(DEFAULT_SOURCE_GLOBS)), "source_globs"))
    if not source_globs:
        source_globs = DEFAULT_SOURCE_GLOBS

    return JsxWrapConfig(
        options=resolve_options(None, options_raw),
        source_globs=source_globs,
        exclude_dirs=tuple(
            name.strip()
            for name in _ensure_string_list(raw.get("exclude_dirs", list(DEFAULT_EXCLUDE_DIRS)), "exclude_dirs")
            if name.strip()
        ),
        max_file_mb=max_file_mb,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)

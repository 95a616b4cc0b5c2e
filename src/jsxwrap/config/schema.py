"""JSON schema for the rule options object and its validation."""

from __future__ import annotations

import difflib
from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator

from jsxwrap.config.model import WrapOptions, resolve_options
from jsxwrap.constants.rule import CONTEXT_NAMES
from jsxwrap.constants.validation import ALLOWED_OPTION_KEYS, CFG004, CFG005, CFG009
from jsxwrap.exceptions import ConfigError
from jsxwrap.exceptions.validation import ValidationError, format_errors

OPTIONS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {context: {"type": "boolean"} for context in CONTEXT_NAMES},
    "additionalProperties": False,
}

_VALIDATOR = Draft202012Validator(OPTIONS_SCHEMA)


def suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def validate_options(
    options: object,
    *,
    path: str = "<options>",
    field: str = "options",
) -> list[ValidationError]:
    """Validate a rule options object and return every problem found.

    ``None`` means no overrides and is valid. Never raises.
    """
    if options is None:
        return []
    if not isinstance(options, Mapping):
        return [
            ValidationError(
                code=CFG009,
                path=path,
                field=field,
                message=f"`{field}` must be a mapping, got {type(options).__name__}",
            )
        ]

    errors: list[ValidationError] = []
    for error in _VALIDATOR.iter_errors(dict(options)):
        if error.validator == "additionalProperties":
            for key in sorted(str(k) for k in options if k not in ALLOWED_OPTION_KEYS):
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path,
                        field=f"{field}.{key}",
                        message=f"unknown key `{key}` in `{field}`",
                        hint=suggest_key(key, ALLOWED_OPTION_KEYS),
                    )
                )
            continue

        key = ".".join(str(part) for part in error.absolute_path)
        errors.append(
            ValidationError(
                code=CFG005,
                path=path,
                field=f"{field}.{key}" if key else field,
                message=f"invalid type for `{key or field}`",
                hint=f"expected a boolean; got: {error.instance!r}",
            )
        )

    return errors


def check_options(options: Mapping[str, object] | None) -> WrapOptions:
    """Validate ``options`` and resolve them against the defaults.

    Raises ``ConfigError`` listing every problem when validation fails.
    """
    errors = validate_options(options)
    if errors:
        raise ConfigError(f"Invalid rule options:\n{format_errors(errors)}")
    return resolve_options(None, options)

"""Config data model for jsxwrap."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from jsxwrap.constants.config import (
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_SOURCE_GLOBS,
)
from jsxwrap.constants.rule import CONTEXT_NAMES, DEFAULT_CONTEXTS
from jsxwrap.types import ContextName


def _field_name(context: ContextName) -> str:
    # ``return`` is a keyword, so its field carries a trailing underscore.
    return "return_" if context == "return" else context


@dataclass(frozen=True)
class WrapOptions:
    """Per-context switches for the multiline JSX check.

    Built once per run by :func:`resolve_options`; rules only ever read the
    named fields, never the raw user mapping.
    """

    declaration: bool = DEFAULT_CONTEXTS["declaration"]
    assignment: bool = DEFAULT_CONTEXTS["assignment"]
    return_: bool = DEFAULT_CONTEXTS["return"]
    arrow: bool = DEFAULT_CONTEXTS["arrow"]
    condition: bool = DEFAULT_CONTEXTS["condition"]
    logical: bool = DEFAULT_CONTEXTS["logical"]
    prop: bool = DEFAULT_CONTEXTS["prop"]

    def is_enabled(self, context: ContextName) -> bool:
        """Return whether ``context`` is checked. Unknown names raise ``KeyError``."""
        if context not in CONTEXT_NAMES:
            raise KeyError(context)
        return getattr(self, _field_name(context))

    def to_dict(self) -> dict[str, bool]:
        """Return options keyed by context name."""
        return {context: self.is_enabled(context) for context in CONTEXT_NAMES}


def resolve_options(
    defaults: Mapping[str, bool] | WrapOptions | None = None,
    overrides: Mapping[str, object] | None = None,
) -> WrapOptions:
    """Merge user overrides onto defaults and return a fully populated ``WrapOptions``.

    A key present in ``overrides`` always wins, including an explicit ``False``.
    Keys outside the seven context names are ignored here; schema validation
    rejects them before this point.
    """
    if defaults is None:
        base: dict[str, bool] = dict(DEFAULT_CONTEXTS)
    elif isinstance(defaults, WrapOptions):
        base = defaults.to_dict()
    else:
        base = {context: bool(defaults.get(context, DEFAULT_CONTEXTS[context])) for context in CONTEXT_NAMES}

    merged = dict(base)
    for context in CONTEXT_NAMES:
        if overrides is not None and context in overrides:
            merged[context] = bool(overrides[context])

    return WrapOptions(**{_field_name(context): merged[context] for context in CONTEXT_NAMES})


@dataclass(frozen=True)
class JsxWrapConfig:
    """Resolved project config."""

    options: WrapOptions = WrapOptions()
    source_globs: tuple[str, ...] = DEFAULT_SOURCE_GLOBS
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    max_file_mb: int = DEFAULT_MAX_FILE_MB

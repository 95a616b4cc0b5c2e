"""Lint rules shipped with jsxwrap."""

from .base import Rule
from .wrap_multilines import WrapMultilinesRule

RULE_CLASSES: tuple[type[Rule], ...] = (WrapMultilinesRule,)

__all__ = ["RULE_CLASSES", "Rule", "WrapMultilinesRule"]

"""Shared type aliases for jsxwrap."""

from .common import ContextName, EventName, JsonObject, JsonScalar, JsonValue

__all__ = [
    "ContextName",
    "EventName",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]

"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

ContextName: TypeAlias = Literal[
    "declaration",
    "assignment",
    "return",
    "arrow",
    "condition",
    "logical",
    "prop",
]

EventName: TypeAlias = Literal["enter", "exit"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

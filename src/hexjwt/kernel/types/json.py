"""JSON value type alias.

Claims hold any JSON value: ``null``, booleans, numbers, strings, arrays
and objects nested to any depth.
"""

from __future__ import annotations

type JsonValue = None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]
type JsonObject = dict[str, JsonValue]

__all__ = ["JsonObject", "JsonValue"]

"""Kernel value types — public re-export surface.

Modules:
  option.py — Some, Nothing, Option
  json.py   — JsonValue, JsonObject
"""

from hexjwt.kernel.types.json import JsonObject, JsonValue
from hexjwt.kernel.types.option import Nothing, Option, Some

__all__ = [
    "JsonObject",
    "JsonValue",
    "Nothing",
    "Option",
    "Some",
]

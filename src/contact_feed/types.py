# Copyright (c)
# SPDX-License-Identifier: MIT
"""Project-wide JSON typing helpers.

These aliases model the values produced by ``json.loads`` and are the input
type of the contact decoder.
"""

from __future__ import annotations

from typing import TypeAlias

JsonPrimitive: TypeAlias = None | bool | int | float | str
JsonValue: TypeAlias = "JsonPrimitive | list[JsonValue] | dict[str, JsonValue]"
JsonObject: TypeAlias = "dict[str, JsonValue]"

__all__ = ["JsonObject", "JsonPrimitive", "JsonValue"]

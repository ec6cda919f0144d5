"""
Builders for TypeScript type expressions.

Type expressions are plain strings; every union, array and named
reference is assembled here so the rules live in one place.
"""

from __future__ import annotations

import json
from typing import Any

# Type used when nothing more precise can be derived
ANY = "any"

# Primitives only: boolean, object and array kinds are not normalized
PRIMITIVE_TYPES: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "number": "number",
}

UNION_SEPARATOR = " | "


def primitive(type_name: str | None) -> str | None:
    """Return the TypeScript primitive for a kind, or None when it has no mapping."""
    if not type_name:
        return None
    return PRIMITIVE_TYPES.get(type_name)


def named(identifier: str) -> str:
    """Reference a declaration by name, or ``any`` for an empty name."""
    return identifier or ANY


def array_of(element: str) -> str:
    """Wrap an element type as an array, parenthesising unions."""
    if UNION_SEPARATOR in element:
        return f"({element})[]"
    return f"{element}[]"


def union(members: list[str]) -> str:
    if not members:
        return ANY
    return UNION_SEPARATOR.join(members)


def literal_union(values: list[Any]) -> str:
    """Union of the JSON encodings of enum values: ["a", 1] -> '"a" | 1'."""
    return union([json.dumps(value, ensure_ascii=False) for value in values])

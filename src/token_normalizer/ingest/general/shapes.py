"""
shapes.py.

Does: Shape predicates for raw JSON values ("is this object a color / a
dimension / a shadow / a token wrapper?"). One definition shared by format
detection, the flat walker and type inference, so the three never disagree
about what counts as a leaf.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any

__all__ = [
    "is_primitive",
    "is_number",
    "is_string_list",
    "is_color_shape",
    "is_dimension_shape",
    "is_shadow_shape",
    "is_value_wrapper",
    "is_value_shape",
    "is_dtcg_token",
]


def is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def is_number(value: Any) -> bool:
    """Finite int or float; bool, inf, nan and ints beyond float range are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and abs(value) <= sys.float_info.max


def is_string_list(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(v, str) for v in value)


def is_color_shape(value: Any) -> bool:
    """{hex}, {r,g,b[,a]} or {components: [...]}."""
    if not isinstance(value, Mapping):
        return False
    if "hex" in value:
        return True
    if all(k in value for k in ("r", "g", "b")):
        return True
    return isinstance(value.get("components"), list)


def is_dimension_shape(value: Any) -> bool:
    return isinstance(value, Mapping) and "value" in value and "unit" in value


def is_shadow_shape(value: Any) -> bool:
    """{shadows: [...]} or a single layer carrying blur + color."""
    if not isinstance(value, Mapping):
        return False
    if isinstance(value.get("shadows"), list):
        return True
    return "blur" in value and "color" in value


def is_value_wrapper(value: Any) -> bool:
    """Classic token object: {value: X[, type, description, ...]} without a unit."""
    return isinstance(value, Mapping) and "value" in value and "unit" not in value


def is_value_shape(value: Any) -> bool:
    """Does: Tell whether a JSON object is one token's value rather than a group."""
    return (
        is_dimension_shape(value)
        or is_color_shape(value)
        or is_shadow_shape(value)
        or is_value_wrapper(value)
    )


def is_dtcg_token(value: Any) -> bool:
    """Both `$type` and `$value` keys present (values may be null)."""
    return isinstance(value, Mapping) and "$type" in value and "$value" in value

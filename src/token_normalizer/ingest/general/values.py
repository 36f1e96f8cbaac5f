"""
values.py
=========

Does: Normalize a raw leaf value into the typed payload of its TokenType
      (DimensionValue, ShadowValue, font-family tuple, primitives).
      Colors are handled by `ingest.color`; everything else lives here.
Returns: normalize_value() and the per-type normalizers. Each raises
         LeafParseError when the value cannot take the requested shape.
Used By: Leaf classification.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from token_normalizer.ingest.color import convert_color, format_css_color
from token_normalizer.ingest.errors import LeafParseError
from token_normalizer.ingest.general.shapes import is_number
from token_normalizer.ingest.general.type_inference import DURATION_RE
from token_normalizer.ingest.types import (
    DimensionValue,
    ShadowLayer,
    ShadowValue,
    TokenType,
    TokenValue,
)

__all__ = [
    "DEFAULT_SHADOW_COLOR",
    "to_number",
    "normalize_dimension",
    "normalize_duration",
    "normalize_shadow",
    "normalize_font_family",
    "normalize_number",
    "normalize_boolean",
    "normalize_string",
    "normalize_value",
]

DEFAULT_SHADOW_COLOR = "rgba(0, 0, 0, 0.1)"

_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")
_INT_RE = re.compile(r"^[+-]?\d+$")
_LENGTH_RE = re.compile(r"^(?P<value>[+-]?(?:\d+\.?\d*|\.\d+))\s*(?P<unit>[a-z%]+)?$", re.IGNORECASE)


# ── Numbers ──────────────────────────────────────────────────────────────────
def to_number(text: str) -> int | float:
    """Does: '16' → 16, '1.5' → 1.5; raises ValueError on anything else."""
    s = text.strip()
    if not _NUMERIC_RE.match(s):
        raise ValueError(f"not a number: {text!r}")
    return int(s) if _INT_RE.match(s) else float(s)


def _number_of(raw: Any) -> int | float | None:
    if is_number(raw):
        return raw
    if isinstance(raw, str):
        try:
            return to_number(raw)
        except ValueError:
            return None
    return None


# ── Dimension / duration ─────────────────────────────────────────────────────
def normalize_dimension(value: Any, *, default_unit: str = "px") -> DimensionValue:
    """Does: Accept 16, '16px', '1.5rem', {value: 16, unit: 'px'}."""
    if is_number(value):
        return DimensionValue(value, default_unit)
    if isinstance(value, str):
        m = _LENGTH_RE.match(value.strip())
        if m:
            return DimensionValue(to_number(m.group("value")), (m.group("unit") or default_unit).lower())
    if isinstance(value, Mapping) and "value" in value:
        number = _number_of(value["value"])
        unit = value.get("unit")
        if number is not None:
            return DimensionValue(number, unit if isinstance(unit, str) and unit else default_unit)
    raise LeafParseError(f"cannot read {value!r} as a dimension")


def normalize_duration(value: Any) -> DimensionValue:
    """Does: Accept 200 (ms), '200ms', '0.3s', {value, unit}."""
    if is_number(value):
        return DimensionValue(value, "ms")
    if isinstance(value, str):
        m = DURATION_RE.match(value.strip())
        if m:
            return DimensionValue(to_number(m.group("value")), m.group("unit").lower())
    if isinstance(value, Mapping) and "value" in value:
        number = _number_of(value["value"])
        unit = str(value.get("unit") or "ms").lower()
        if number is not None and unit in ("ms", "s"):
            return DimensionValue(number, unit)
    raise LeafParseError(f"cannot read {value!r} as a duration")


# ── Shadow ───────────────────────────────────────────────────────────────────
def _length(raw: Any, field: str) -> int | float:
    if raw is None:
        return 0
    if is_number(raw):
        return raw
    if isinstance(raw, str):
        m = _LENGTH_RE.match(raw.strip())
        if m:
            return to_number(m.group("value"))
    if isinstance(raw, Mapping) and "value" in raw:
        number = _number_of(raw["value"])
        if number is not None:
            return number
    raise LeafParseError(f"shadow {field} {raw!r} is not a length")


def _first(layer: Mapping[str, Any], *keys: str) -> Any:
    for k in keys:
        if k in layer:
            return layer[k]
    return None


def _shadow_color(raw: Any) -> str:
    if raw is None:
        return DEFAULT_SHADOW_COLOR
    color = convert_color(raw)
    if color is not None:
        return format_css_color(color)
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    raise LeafParseError(f"shadow color {raw!r} is not a color")


def _shadow_layer(layer: Any) -> ShadowLayer:
    if not isinstance(layer, Mapping):
        raise LeafParseError(f"shadow layer {layer!r} is not an object")
    inset = bool(layer.get("inset", False)) or layer.get("type") == "innerShadow"
    return ShadowLayer(
        x=_length(_first(layer, "x", "offsetX"), "x"),
        y=_length(_first(layer, "y", "offsetY"), "y"),
        blur=_length(_first(layer, "blur", "blurRadius"), "blur"),
        spread=_length(_first(layer, "spread", "spreadRadius"), "spread"),
        color=_shadow_color(layer.get("color")),
        inset=inset,
    )


def normalize_shadow(value: Any) -> ShadowValue:
    """Does: Accept {shadows: [...]}, one layer object, or a list of layers."""
    if isinstance(value, Mapping) and isinstance(value.get("shadows"), list):
        layers = value["shadows"]
    elif isinstance(value, Mapping):
        layers = [value]
    elif isinstance(value, list):
        layers = value
    else:
        raise LeafParseError(f"cannot read {value!r} as a shadow")
    return ShadowValue(tuple(_shadow_layer(layer) for layer in layers))


# ── Font family ──────────────────────────────────────────────────────────────
def normalize_font_family(value: Any) -> tuple[str, ...]:
    """Does: ['Inter', 'sans-serif'] or "Inter, 'Helvetica Neue', sans-serif"."""
    if isinstance(value, str):
        parts = [p.strip().strip("'\"").strip() for p in value.split(",")]
    elif isinstance(value, list) and all(isinstance(v, str) for v in value):
        parts = [v.strip() for v in value]
    else:
        raise LeafParseError(f"cannot read {value!r} as a font family list")
    families = tuple(p for p in parts if p)
    if not families:
        raise LeafParseError("empty font family list")
    return families


# ── Primitives ───────────────────────────────────────────────────────────────
def normalize_number(value: Any) -> int | float:
    number = _number_of(value)
    if number is None:
        raise LeafParseError(f"cannot read {value!r} as a number")
    return number


def normalize_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise LeafParseError(f"cannot read {value!r} as a boolean")


def normalize_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if is_number(value) or isinstance(value, bool):
        return json.dumps(value)
    raise LeafParseError(f"unrecognized value shape {type(value).__name__}")


# ── Dispatch ─────────────────────────────────────────────────────────────────
def normalize_value(token_type: TokenType, value: Any, *, default_unit: str = "px") -> TokenValue:
    """
    Does: Route a raw value to the normalizer for `token_type`.
    Returns: The typed payload; raises LeafParseError when it does not fit.
    """
    if token_type == "color":
        color = convert_color(value)
        if color is None:
            raise LeafParseError(f"cannot read {value!r} as a color")
        return color
    if token_type == "dimension":
        return normalize_dimension(value, default_unit=default_unit)
    if token_type == "duration":
        return normalize_duration(value)
    if token_type == "shadow":
        return normalize_shadow(value)
    if token_type == "fontFamily":
        return normalize_font_family(value)
    if token_type == "number":
        return normalize_number(value)
    if token_type == "boolean":
        return normalize_boolean(value)
    return normalize_string(value)

"""
convert.py
==========

Does: Convert heterogeneous color encodings (hex strings, rgb()/hsl() strings,
      CSS named colors, 0–255 channel objects, Figma 0–1 float channels and
      DTCG `components` objects) into one canonical ColorValue.
Used By: Leaf classification (every color-typed token) and shadow layers.
Returns: ColorValue (hex, integer RGB, opacity) or None when nothing is
         parseable; rgb_to_hex() for channel triples.
"""

from __future__ import annotations

import colorsys
import logging
import math
import sys
from collections.abc import Mapping, Sequence
from typing import Any

import webcolors

from token_normalizer.ingest.color.constants import (
    ALPHA_KEYS,
    CHANNEL_KEYS,
    EXTRA_NAMED_COLORS,
    FUNC_ARGS_RE,
    HEX_RE,
)
from token_normalizer.ingest.types import RGB, ColorValue

# Public surface
__all__ = [
    "rgb_to_hex",
    "hex_to_rgb_alpha",
    "parse_color_string",
    "convert_color",
    "format_css_color",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# =============================================================================
# 1) CHANNEL HELPERS
# =============================================================================

def _is_number(v: Any) -> bool:
    # JSON 1e999 decodes to inf; comparing also rejects nan and ints no float can hold
    return isinstance(v, (int, float)) and not isinstance(v, bool) and abs(v) <= sys.float_info.max


def _clamp_channel(v: float) -> int:
    # half-up rounding, so 0.5 * 255 lands on 128
    return max(0, min(255, math.floor(v + 0.5)))


def _clamp_opacity(v: float) -> float:
    return max(0.0, min(1.0, float(v)))


def _opacity_from(raw: Any) -> float | None:
    """Does: Read an alpha as float (0–1), '50%' string, or 0–255 integer."""
    if _is_number(raw):
        a = float(raw)
        # 0–255 alpha channels show up next to 0–255 color channels
        if a > 1:
            a = a / 255.0
        return round(_clamp_opacity(a), 4)
    if isinstance(raw, str):
        s = raw.strip()
        try:
            if s.endswith("%"):
                return round(_clamp_opacity(float(s[:-1]) / 100.0), 4)
            return _opacity_from(float(s))
        except ValueError:
            return None
    return None


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Does: Format channels (clamped, rounded) as lowercase '#rrggbb'."""
    return webcolors.rgb_to_hex((_clamp_channel(r), _clamp_channel(g), _clamp_channel(b)))


def _from_channels(channels: Sequence[float], opacity: float | None) -> ColorValue:
    """Does: Build a ColorValue from raw channels, picking 0–1 vs 0–255 scale.

    Any channel above 1 means the triple is already 0–255; otherwise it is
    treated as normalized sRGB floats (Figma convention) and scaled by 255.
    """
    if any(c > 1 for c in channels):
        r, g, b = (_clamp_channel(c) for c in channels)
    else:
        r, g, b = (_clamp_channel(c * 255) for c in channels)
    return ColorValue(
        hex=rgb_to_hex(r, g, b),
        rgb=RGB(r, g, b),
        opacity=1.0 if opacity is None else opacity,
    )


# =============================================================================
# 2) HEX
# =============================================================================

def hex_to_rgb_alpha(value: str) -> tuple[RGB, float] | None:
    """Does: Decode #rgb/#rgba/#rrggbb/#rrggbbaa into (RGB, opacity)."""
    s = value.strip()
    if not HEX_RE.match(s):
        return None
    digits = s[1:]
    alpha = 1.0
    if len(digits) in (4, 8):
        split = len(digits) * 3 // 4
        a_hex = digits[split:]
        if len(a_hex) == 1:
            a_hex *= 2
        alpha = round(int(a_hex, 16) / 255.0, 4)
        digits = digits[:split]
    rgb = webcolors.hex_to_rgb(f"#{digits}")
    return RGB(rgb.red, rgb.green, rgb.blue), alpha


def _from_hex_literal(literal: str, opacity: float | None) -> ColorValue | None:
    decoded = hex_to_rgb_alpha(literal)
    if decoded is None:
        return None
    rgb, hex_alpha = decoded
    # The literal is kept verbatim: it is the designer's explicit value.
    return ColorValue(hex=literal.strip(), rgb=rgb, opacity=hex_alpha if opacity is None else opacity)


# =============================================================================
# 3) CSS COLOR STRINGS
# =============================================================================

def _finite_arg(arg: str) -> bool:
    body = arg[:-3] if arg.lower().endswith("deg") else arg.rstrip("%")
    return math.isfinite(float(body))


def _parse_function(s: str) -> ColorValue | None:
    m = FUNC_ARGS_RE.match(s)
    if not m:
        return None
    fn = m.group("fn").lower()
    a, b, c = m.group("a"), m.group("b"), m.group("c")
    opacity = _opacity_from(m.group("alpha")) if m.group("alpha") is not None else None
    if not all(_finite_arg(p) for p in (a, b, c)):
        return None

    if fn.startswith("rgb"):
        parts = (a, b, c)
        if all(p.endswith("%") for p in parts):
            rgb = webcolors.rgb_percent_to_rgb(parts)
            r, g, bl = rgb.red, rgb.green, rgb.blue
        elif any(p.endswith("%") or p.endswith("deg") for p in parts):
            return None
        else:
            r, g, bl = (_clamp_channel(float(p)) for p in parts)
        return ColorValue(hex=rgb_to_hex(r, g, bl), rgb=RGB(r, g, bl), opacity=1.0 if opacity is None else opacity)

    # hsl(): hue in degrees, saturation/lightness in percent
    hue = float(a[:-3] if a.lower().endswith("deg") else a.rstrip("%"))
    sat = float(b.rstrip("%")) / 100.0
    light = float(c.rstrip("%")) / 100.0
    rf, gf, bf = colorsys.hls_to_rgb((hue % 360) / 360.0, _clamp_opacity(light), _clamp_opacity(sat))
    r, g, bl = _clamp_channel(rf * 255), _clamp_channel(gf * 255), _clamp_channel(bf * 255)
    return ColorValue(hex=rgb_to_hex(r, g, bl), rgb=RGB(r, g, bl), opacity=1.0 if opacity is None else opacity)


def parse_color_string(value: str) -> ColorValue | None:
    """Does: Parse hex, rgb()/rgba(), hsl()/hsla(), or a CSS named color."""
    s = value.strip()
    if not s:
        return None
    if s.startswith("#"):
        return _from_hex_literal(s, None)
    parsed = _parse_function(s)
    if parsed is not None:
        return parsed
    name = s.lower()
    if name == "transparent":
        return ColorValue(hex="#000000", rgb=RGB(0, 0, 0), opacity=0.0)
    if name in EXTRA_NAMED_COLORS:
        return _from_hex_literal(EXTRA_NAMED_COLORS[name], None)
    try:
        hx = webcolors.name_to_hex(name)
    except ValueError:
        return None
    return _from_hex_literal(hx, None)


# =============================================================================
# 4) PUBLIC ENTRY
# =============================================================================

def _alpha_of(obj: Mapping[str, Any]) -> float | None:
    for key in ALPHA_KEYS:
        if key in obj:
            return _opacity_from(obj[key])
    return None


def convert_color(value: Any) -> ColorValue | None:
    """
    Does: Normalize any recognized color shape to ColorValue.
          An explicit hex literal (string or `hex` key) always wins over
          channels/components found alongside it.
    Returns: ColorValue, or None when the value carries no usable color.
    """
    if isinstance(value, str):
        return parse_color_string(value)

    if not isinstance(value, Mapping):
        return None

    opacity = _alpha_of(value)

    hex_literal = value.get("hex")
    if isinstance(hex_literal, str):
        from_hex = _from_hex_literal(hex_literal, opacity)
        if from_hex is not None:
            return from_hex
        logger.debug("Ignoring malformed hex literal %r", hex_literal)

    if all(k in value for k in CHANNEL_KEYS):
        channels = [value[k] for k in CHANNEL_KEYS]
        if all(_is_number(c) for c in channels):
            return _from_channels(channels, opacity)
        return None

    components = value.get("components")
    if isinstance(components, Sequence) and not isinstance(components, str):
        comps = list(components)
        if len(comps) >= 3 and all(_is_number(c) for c in comps[:4]):
            space = value.get("colorSpace")
            if space and str(space).lower() not in ("srgb", "srgb-linear"):
                logger.debug("Treating colorSpace %r as sRGB", space)
            if opacity is None and len(comps) == 4:
                opacity = _opacity_from(comps[3])
            return _from_channels(comps[:3], opacity)

    return None


def format_css_color(color: ColorValue) -> str:
    """Does: Render a ColorValue as a CSS string (hex when opaque, rgba() otherwise)."""
    if color.opacity >= 1 or not color.defined:
        return color.hex
    r, g, b = color.rgb
    return f"rgba({r}, {g}, {b}, {color.opacity:g})"

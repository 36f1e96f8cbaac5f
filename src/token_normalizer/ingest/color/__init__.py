"""
color.
=====

Does: Aggregate color-domain constants and conversion helpers shared by type
      inference, leaf classification, and shadow normalization.
Returns: Pure functions and frozen constants; no side effects.
"""

from .constants import (
    HEX_RE,
    HSL_FUNC_RE,
    MISSING_COLOR,
    RGB_FUNC_RE,
)
from .convert import (
    convert_color,
    format_css_color,
    hex_to_rgb_alpha,
    parse_color_string,
    rgb_to_hex,
)

__all__ = [
    # constants
    "HEX_RE",
    "RGB_FUNC_RE",
    "HSL_FUNC_RE",
    "MISSING_COLOR",
    # conversion
    "rgb_to_hex",
    "hex_to_rgb_alpha",
    "parse_color_string",
    "convert_color",
    "format_css_color",
]

__docformat__ = "google"

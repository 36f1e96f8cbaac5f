# constants.py
# ============

"""
constants.
=========

Does: Define immutable color-domain constants: recognizer patterns for CSS color
      strings, the alpha key aliases used by design tools, and the
      "no value defined" sentinel.
Used By: Color conversion and type inference.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

import re

from token_normalizer.ingest.types import RGB, ColorValue

# ── 1) String recognizers ────────────────────────────────────────────────────
# #rgb, #rgba, #rrggbb, #rrggbbaa
HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
RGB_FUNC_RE = re.compile(r"^rgba?\s*\(", re.IGNORECASE)
HSL_FUNC_RE = re.compile(r"^hsla?\s*\(", re.IGNORECASE)

# Function body: "a, b, c[, d]" or "a b c[ / d]"
_NUM = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
FUNC_ARGS_RE = re.compile(
    rf"^(?P<fn>rgba?|hsla?)\s*\(\s*"
    rf"(?P<a>{_NUM}(?:%|deg)?)\s*(?:,\s*|\s+)"
    rf"(?P<b>{_NUM}%?)\s*(?:,\s*|\s+)"
    rf"(?P<c>{_NUM}%?)"
    rf"(?:\s*(?:,|/)\s*(?P<alpha>{_NUM}%?))?"
    rf"\s*\)$",
    re.IGNORECASE,
)

# ── 2) Object keys ───────────────────────────────────────────────────────────
ALPHA_KEYS: tuple[str, ...] = ("a", "alpha", "opacity")
CHANNEL_KEYS: tuple[str, str, str] = ("r", "g", "b")

# ── 3) Sentinel ──────────────────────────────────────────────────────────────
# Emitted for color leaves whose value cannot be converted; rendered by callers
# as "no value defined".
MISSING_COLOR = ColorValue(hex="", rgb=RGB(0, 0, 0), opacity=0.0)

# ── 4) Named colors webcolors' css3 table lacks ──────────────────────────────
# CSS Color 4 added rebeccapurple after the css3 list was frozen
EXTRA_NAMED_COLORS: dict[str, str] = {"rebeccapurple": "#663399"}

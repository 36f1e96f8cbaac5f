"""
type_inference.py
=================

Does: Classify a raw leaf value into one canonical TokenType. A recognized
      declared type (`$type` / `type`, canonical name or configured alias,
      case-insensitive) wins; otherwise an ordered (predicate, type) table is
      evaluated top-to-bottom.
Returns: resolve_type_hint(), infer_type(), detect_type(), VALUE_RULES.
Used By: Leaf classification.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from token_normalizer.ingest.color.constants import HEX_RE, HSL_FUNC_RE, RGB_FUNC_RE
from token_normalizer.ingest.general.shapes import (
    is_color_shape,
    is_dimension_shape,
    is_number,
    is_shadow_shape,
    is_string_list,
)
from token_normalizer.ingest.general.utils import load_config
from token_normalizer.ingest.types import TOKEN_TYPES, TokenType

__all__ = [
    "DIMENSION_RE",
    "DURATION_RE",
    "VALUE_RULES",
    "resolve_type_hint",
    "infer_type",
    "detect_type",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── String recognizers ───────────────────────────────────────────────────────
_NUMBER = r"-?(?:\d+\.?\d*|\.\d+)"
DIMENSION_RE = re.compile(rf"^(?P<value>{_NUMBER})(?P<unit>px|rem|em|%|vh|vw)$", re.IGNORECASE)
DURATION_RE = re.compile(r"^(?P<value>(?:\d+\.?\d*|\.\d+))(?P<unit>ms|s)$", re.IGNORECASE)

_CANONICAL_BY_LOWER: dict[str, TokenType] = {t.lower(): t for t in TOKEN_TYPES}


# ── Declared-type hints ──────────────────────────────────────────────────────
def _validate_aliases(data: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, TokenType] = {}
    for alias, target in data.items():
        canonical = _CANONICAL_BY_LOWER.get(str(target).lower())
        if canonical is None:
            raise ValueError(f"alias {alias!r} targets unknown type {target!r}")
        out[str(alias).lower()] = canonical
    return out


def _type_aliases(data_dir: Path | None = None) -> dict[str, TokenType]:
    return load_config(
        "type_aliases", base_dir=data_dir, validator=_validate_aliases
    )


def resolve_type_hint(hint: Any, *, data_dir: Path | None = None) -> TokenType | None:
    """Does: Map a declared type ('COLOR', 'fontFamily', 'FLOAT', ...) to a TokenType."""
    if not isinstance(hint, str) or not hint.strip():
        return None
    key = hint.strip().lower()
    if key in _CANONICAL_BY_LOWER:
        return _CANONICAL_BY_LOWER[key]
    return _type_aliases(data_dir).get(key)


# ── Value-shape rules (order matters) ────────────────────────────────────────
def _is_color_string(v: Any) -> bool:
    if not isinstance(v, str):
        return False
    s = v.strip()
    return bool(HEX_RE.match(s) or RGB_FUNC_RE.match(s) or HSL_FUNC_RE.match(s))


def _is_dimension_string(v: Any) -> bool:
    return isinstance(v, str) and bool(DIMENSION_RE.match(v.strip()))


def _is_duration_string(v: Any) -> bool:
    return isinstance(v, str) and bool(DURATION_RE.match(v.strip()))


VALUE_RULES: tuple[tuple[Callable[[Any], bool], TokenType], ...] = (
    (_is_color_string, "color"),
    (_is_dimension_string, "dimension"),
    (_is_duration_string, "duration"),
    # bool before number: bool is an int subclass
    (lambda v: isinstance(v, bool), "boolean"),
    (is_number, "number"),
    (is_string_list, "fontFamily"),
    (is_shadow_shape, "shadow"),
    (is_color_shape, "color"),
    (is_dimension_shape, "dimension"),
)


def detect_type(value: Any) -> TokenType:
    """Does: Classify by value shape alone; unrecognized values are 'string'."""
    for predicate, token_type in VALUE_RULES:
        if predicate(value):
            return token_type
    return "string"


def infer_type(value: Any, hint: Any = None, *, data_dir: Path | None = None) -> TokenType:
    """
    Does: Resolve the canonical type of a leaf: recognized hint first, then
          value shape. Never raises.
    """
    declared = resolve_type_hint(hint, data_dir=data_dir)
    if declared is not None:
        return declared
    if hint is not None and logger.isEnabledFor(logging.DEBUG):
        logger.debug("Unrecognized type hint %r; inferring from value", hint)
    return detect_type(value)

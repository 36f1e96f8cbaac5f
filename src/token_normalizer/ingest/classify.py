"""
classify.py
===========

Does: Turn one walked leaf into a canonical Token: infer the type, normalize
      the value (colors through the color normalizer), pick the category and
      synthesize the CSS variable. Failures never raise: a color that cannot
      be read becomes the MISSING_COLOR sentinel, a declared type that does
      not fit the value falls back to the value's own shape, and a value with
      no usable shape is reported as a skip.
Returns: classify_leaf() → LeafOutcome(token | None, warnings, skip_reason).
Used By: The orchestrator, once per leaf.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from token_normalizer.ingest.color import MISSING_COLOR
from token_normalizer.ingest.errors import LeafParseError
from token_normalizer.ingest.general import (
    detect_category,
    detect_type,
    generate_css_variable,
    infer_type,
    normalize_value,
)
from token_normalizer.ingest.types import ParseOptions, Token, TokenType, TokenValue
from token_normalizer.ingest.walkers import PATH_SEPARATOR, LeafNode

__all__ = ["LeafOutcome", "classify_leaf", "token_name"]

logger = logging.getLogger(__name__)

# DTCG / Tokens Studio references: "{color.primary.500}"
_ALIAS_RE = re.compile(r"^\{[^{}]+\}$")


@dataclass(frozen=True)
class LeafOutcome:
    token: Token | None
    warnings: tuple[str, ...] = ()
    skip_reason: str | None = None


def token_name(path: str) -> str:
    """Does: Last path segment, the human label of a token."""
    return path.rsplit(PATH_SEPARATOR, 1)[-1]


def _color_failure(raw: Any, exc: LeafParseError) -> str:
    if isinstance(raw, str) and _ALIAS_RE.match(raw.strip()):
        return f"unresolved alias reference {raw.strip()}; no color value defined"
    return f"{exc}; no color value defined"


def _normalize(
    leaf: LeafNode, options: ParseOptions, warnings: list[str]
) -> tuple[TokenType, TokenValue] | str:
    """Does: Resolve (type, value) for a leaf, or return the skip reason."""
    token_type = infer_type(leaf.value, leaf.type_hint, data_dir=options.data_dir)
    try:
        return token_type, normalize_value(token_type, leaf.value, default_unit=options.default_unit)
    except LeafParseError as exc:
        if token_type == "color":
            warnings.append(f"{leaf.path}: {_color_failure(leaf.value, exc)}")
            return "color", MISSING_COLOR
        declared_error = exc

    fallback = detect_type(leaf.value)
    if fallback == token_type:
        return str(declared_error)
    try:
        value = normalize_value(fallback, leaf.value, default_unit=options.default_unit)
    except LeafParseError:
        return str(declared_error)
    warnings.append(
        f"{leaf.path}: declared type {leaf.type_hint!r} does not match value; treated as {fallback}"
    )
    return fallback, value


def classify_leaf(leaf: LeafNode, options: ParseOptions | None = None) -> LeafOutcome:
    """
    Does: Classify one leaf into a Token plus per-leaf warnings.
    Returns: LeafOutcome with token=None and a skip_reason when the leaf is lost.
    """
    options = options or ParseOptions()
    if leaf.value is None:
        return LeafOutcome(None, skip_reason="no value defined")

    warnings: list[str] = []
    resolved = _normalize(leaf, options, warnings)
    if isinstance(resolved, str):
        return LeafOutcome(None, tuple(warnings), skip_reason=resolved)
    token_type, value = resolved

    category = detect_category(leaf.path, token_type, data_dir=options.data_dir)
    if category == "other" and options.warn_uncategorized:
        warnings.append(f"{leaf.path}: no category keyword matched; assigned 'other'")

    token = Token(
        path=leaf.path,
        name=token_name(leaf.path),
        category=category,
        type=token_type,
        value=value,
        css_variable=generate_css_variable(leaf.path),
        metadata=leaf.metadata,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Classified %s as %s/%s", leaf.path, category, token_type)
    return LeafOutcome(token, tuple(warnings))

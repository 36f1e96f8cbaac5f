"""
format_detection.py
===================

Does: Classify a whole decoded JSON document as one of the known token
      schemas (figma-variables / DTCG, style-dictionary, flat) or 'unknown'.
      Rules are checked in order and the first match wins.
Returns: detect_format() → TokenFormat; find_collections() → the
         style-dictionary `collections` list (top level or one level deep).
Used By: The orchestrator, to pick a walker.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from token_normalizer.ingest.general.shapes import (
    is_dtcg_token,
    is_primitive,
    is_value_shape,
)
from token_normalizer.ingest.types import TokenFormat

__all__ = ["detect_format", "find_collections"]

logger = logging.getLogger(__name__)


# ── Style Dictionary (collections → modes → variables) ──────────────────────
def _has_mode_variables(collections: Any) -> bool:
    if not isinstance(collections, list) or not collections:
        return False
    for collection in collections:
        if not isinstance(collection, Mapping):
            continue
        modes = collection.get("modes")
        if not isinstance(modes, list):
            continue
        if any(isinstance(m, Mapping) and isinstance(m.get("variables"), list) for m in modes):
            return True
    return False


def find_collections(document: Any) -> list[Any] | None:
    """Does: Locate a collections[].modes[].variables[] list at depth 0 or 1."""
    if not isinstance(document, Mapping):
        return None
    if _has_mode_variables(document.get("collections")):
        return document["collections"]
    for child in document.values():
        if isinstance(child, Mapping) and _has_mode_variables(child.get("collections")):
            return child["collections"]
    return None


# ── DTCG ($type + $value anywhere) ──────────────────────────────────────────
def _has_dtcg_token(document: Mapping[str, Any]) -> bool:
    stack: list[Any] = [document]
    while stack:
        node = stack.pop()
        if isinstance(node, Mapping):
            if is_dtcg_token(node):
                return True
            stack.extend(node.values())
        elif isinstance(node, list):
            stack.extend(node)
    return False


# ── Flat (every terminal is a primitive) ────────────────────────────────────
def _is_flat(document: Mapping[str, Any]) -> bool:
    terminals = 0
    stack: list[Any] = list(document.values())
    while stack:
        node = stack.pop()
        if isinstance(node, Mapping):
            if is_value_shape(node):
                terminals += 1
            else:
                stack.extend(node.values())
        elif isinstance(node, list):
            if not all(is_primitive(v) for v in node):
                return False
            terminals += 1
        elif is_primitive(node):
            terminals += 1
        else:
            return False
    return terminals > 0


# ── Public entry ─────────────────────────────────────────────────────────────
def detect_format(document: Any) -> TokenFormat:
    """
    Does: Apply the ordered rules:
          1) not a non-empty object → unknown
          2) collections/modes/variables → style-dictionary
          3) any {$type, $value} object → figma-variables
          4) only primitive terminals → flat
          5) otherwise → unknown
    """
    if not isinstance(document, Mapping) or not document:
        return "unknown"
    if find_collections(document) is not None:
        return "style-dictionary"
    if _has_dtcg_token(document):
        return "figma-variables"
    if _is_flat(document):
        return "flat"
    logger.debug("Document matched no known token format (keys=%s)", list(document)[:5])
    return "unknown"

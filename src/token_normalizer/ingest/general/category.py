"""
category.py

Does:
    Classify a token path into one of the fixed semantic categories by
    lowercase substring matching against an ordered keyword table
    (radius → shadow → grid → spacing → typography → color → other).
    Radius is checked before color so "border-radius" never lands on the
    generic "border" color keyword.
Returns:
    detect_category() → Category; category_keywords() → ordered table.
"""

from __future__ import annotations

# ── Imports & Public API ──────────────────────────────────────────────────────
import logging
from pathlib import Path
from typing import Any

from token_normalizer.ingest.general.utils import load_config
from token_normalizer.ingest.types import CATEGORIES, Category, TokenType

__all__ = ["category_keywords", "detect_category"]

logger = logging.getLogger(__name__)

# Token types that carry their category with them when the path says nothing
_TYPE_CATEGORIES: dict[str, Category] = {"color": "color", "shadow": "shadow"}


# ── Keyword table (config-backed) ────────────────────────────────────────────
def _validate_keywords(data: dict[str, Any]) -> dict[str, Any]:
    table: dict[str, tuple[str, ...]] = {}
    for category, keywords in data.items():
        if category not in CATEGORIES or category == "other":
            raise ValueError(f"unknown category {category!r}")
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise ValueError(f"keywords for {category!r} must be a list of strings")
        table[category] = tuple(k.lower() for k in keywords if k)
    return table


def category_keywords(data_dir: Path | None = None) -> dict[Category, tuple[str, ...]]:
    """Does: Return the ordered {category: keywords} table (file order = priority)."""
    return load_config(
        "category_keywords",
        base_dir=data_dir,
        validator=_validate_keywords,
    )


# ── Core API (public) ────────────────────────────────────────────────────────
def detect_category(
    path: str,
    token_type: TokenType | None = None,
    *,
    data_dir: Path | None = None,
) -> Category:
    """
    Does:
        Match the lowercased path against the keyword table; the first
        category with a keyword contained in the path wins. When nothing
        matches, a color or shadow `token_type` decides; else "other".
    Returns:
        Always a member of CATEGORIES, for any string (including "").
    """
    lowered = path.lower() if isinstance(path, str) else ""
    if lowered:
        for category, keywords in category_keywords(data_dir).items():
            if any(k in lowered for k in keywords):
                return category
    if token_type is not None and token_type in _TYPE_CATEGORIES:
        return _TYPE_CATEGORIES[token_type]
    return "other"

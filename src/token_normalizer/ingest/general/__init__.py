"""
general.
=======

Does: Per-leaf and per-document classifiers: CSS variable synthesis, type and
      category inference, format detection, shape predicates and typed value
      normalization.
Used By: Walkers, leaf classification and the orchestrator.
"""

from __future__ import annotations

from .category import category_keywords, detect_category
from .css_variable import generate_css_variable, is_valid_css_variable
from .format_detection import detect_format, find_collections
from .type_inference import VALUE_RULES, detect_type, infer_type, resolve_type_hint
from .values import normalize_value

__all__ = [
    # css variables
    "generate_css_variable",
    "is_valid_css_variable",
    # inference
    "infer_type",
    "detect_type",
    "resolve_type_hint",
    "VALUE_RULES",
    "detect_category",
    "category_keywords",
    # documents
    "detect_format",
    "find_collections",
    # values
    "normalize_value",
]

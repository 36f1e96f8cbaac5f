"""
token_normalizer
================

Does: Root package initializer for the design-token normalizer.
Returns: The public parsing entry points, the standalone classifiers and the
         canonical token model.
Used by: Import wizards, persistence layers and export generators.
"""

from __future__ import annotations

from .ingest import ParseOptions, ParseResult, Token, parse_token_file, parse_tokens
from .ingest.color import convert_color, rgb_to_hex
from .ingest.general import (
    detect_category,
    detect_format,
    detect_type,
    generate_css_variable,
    infer_type,
)

__all__: list[str] = [
    "parse_tokens",
    "parse_token_file",
    "detect_format",
    "detect_category",
    "detect_type",
    "infer_type",
    "generate_css_variable",
    "convert_color",
    "rgb_to_hex",
    "ParseOptions",
    "ParseResult",
    "Token",
]
__docformat__ = "google"

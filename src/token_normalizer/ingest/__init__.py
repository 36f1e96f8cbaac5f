# token_normalizer/ingest/__init__.py
"""
ingest.
======

Does: Design-token ingestion stack: format detection, per-format walkers, leaf
      classification (type, category, CSS variable, normalized value) and
      result aggregation.
Returns: parse_tokens / parse_token_file plus the canonical token model.
Used by: The top-level package and the demo CLI.
"""
from __future__ import annotations

from .errors import FormatError, LeafParseError, TokenIngestError
from .orchestrator import parse_token_file, parse_tokens
from .types import (
    ColorValue,
    DimensionValue,
    ParseMetadata,
    ParseOptions,
    ParseResult,
    ShadowLayer,
    ShadowValue,
    Token,
    TokenMetadata,
)

__all__ = [
    "parse_tokens",
    "parse_token_file",
    # model
    "Token",
    "TokenMetadata",
    "ColorValue",
    "DimensionValue",
    "ShadowLayer",
    "ShadowValue",
    "ParseMetadata",
    "ParseResult",
    "ParseOptions",
    # errors
    "TokenIngestError",
    "FormatError",
    "LeafParseError",
]
__docformat__ = "google"

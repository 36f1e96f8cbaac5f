"""
errors.py.

Does: Exception taxonomy for token ingestion. None of these escape
`parse_tokens`: they are caught at the document or leaf level and turned
into `errors` / `warnings` entries.
"""

from __future__ import annotations

__all__ = ["TokenIngestError", "FormatError", "LeafParseError"]


class TokenIngestError(Exception):
    """Base class for ingestion failures."""


class FormatError(TokenIngestError):
    """Raise when the whole document matches no known token schema."""


class LeafParseError(TokenIngestError, ValueError):
    """Raise when a single leaf's value cannot be normalized for its type."""

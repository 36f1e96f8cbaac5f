# ingest/general/css_variable.py
# ──────────────────────────────────────────────────────────────
# Deterministic CSS custom-property names from token paths
# ──────────────────────────────────────────────────────────────
"""
css_variable.

Does: Derive a `--kebab-case` CSS custom property from a hierarchical token
      path. Pure, deterministic and idempotent: re-importing the same export
      always reproduces the same names.
Returns: generate_css_variable(), is_valid_css_variable().
Used by: Leaf classification; export/injection consumers rely on the result.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "CSS_VARIABLE_RE",
    "FALLBACK_BODY",
    "generate_css_variable",
    "is_valid_css_variable",
]

CSS_VARIABLE_RE = re.compile(r"^--[a-z0-9]+(?:-[a-z0-9]+)*$")

# Used when a path contains nothing expressible in [a-z0-9]
FALLBACK_BODY = "token"

_SEPARATORS_RE = re.compile(r"[/._\s]+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")


def _ascii_fold(s: str) -> str:
    """
    Does: NFKD-decompose and drop combining marks so accented letters keep
          their base letter ("Açaí" -> "Acai") instead of being stripped.
    """
    decomposed = unicodedata.normalize("NFKD", s)
    return decomposed.encode("ascii", "ignore").decode("ascii")


def generate_css_variable(path: str) -> str:
    """
    Does: lowercase → separators (/ . _ whitespace) to '-' → strip anything
          outside [a-z0-9-] → collapse '-' runs → trim '-' → prefix '--'.
    Returns: A name matching ^--[a-z0-9-]+$ with no '--' after the prefix.
    """
    body = _ascii_fold(path if isinstance(path, str) else str(path)).lower()
    body = _SEPARATORS_RE.sub("-", body)
    body = _DISALLOWED_RE.sub("", body)
    body = _HYPHEN_RUN_RE.sub("-", body).strip("-")
    return f"--{body or FALLBACK_BODY}"


def is_valid_css_variable(name: str) -> bool:
    """Does: Check the well-formedness invariant every emitted token satisfies."""
    return isinstance(name, str) and bool(CSS_VARIABLE_RE.match(name))

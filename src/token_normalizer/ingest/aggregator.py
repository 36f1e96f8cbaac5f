"""
aggregator.py
=============

Does: Collect tokens, warnings, errors and per-category counts for one parse
      call and freeze them into a ParseResult. Enforces path uniqueness (the
      first leaf for a path wins) and reports CSS variable collisions between
      distinct paths (both tokens are kept).
Returns: TokenAggregator; unrecognized_result() for the unknown-format
         short-circuit.
"""

from __future__ import annotations

import logging
from collections import Counter

from token_normalizer.ingest.types import (
    CATEGORIES,
    ParseMetadata,
    ParseResult,
    Token,
    TokenFormat,
)
from token_normalizer.ingest.walkers import WalkIssue

__all__ = ["UNRECOGNIZED_FORMAT", "TokenAggregator", "unrecognized_result"]

logger = logging.getLogger(__name__)

UNRECOGNIZED_FORMAT = "unrecognized token format"


def unrecognized_result(message: str = UNRECOGNIZED_FORMAT) -> ParseResult:
    """Does: The short-circuit result for documents no walker understands."""
    return ParseResult(
        tokens=(),
        errors=(message,),
        warnings=(),
        metadata=ParseMetadata(format="unknown"),
    )


class TokenAggregator:
    """Accumulates one parse call's output; not shared between calls."""

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._errors: list[str] = []
        self._warnings: list[str] = []
        self._paths: set[str] = set()
        self._css_owner: dict[str, str] = {}
        self._categories: Counter[str] = Counter()
        self._skipped = 0

    # ── Diagnostics ──────────────────────────────────────────────────────────
    def warn(self, message: str) -> None:
        self._warnings.append(message)

    def error(self, message: str) -> None:
        self._errors.append(message)

    def skip(self, path: str, reason: str) -> None:
        self._skipped += 1
        self.warn(f"Skipped {path}: {reason}")

    def record_issue(self, issue: WalkIssue) -> None:
        if issue.skipped:
            self.skip(issue.path, issue.reason)
        else:
            self.warn(f"{issue.path}: {issue.reason}")

    # ── Tokens ───────────────────────────────────────────────────────────────
    def add(self, token: Token) -> bool:
        """
        Does: Append a token unless its path was already emitted.
        Returns: False when the token was dropped as a duplicate path.
        """
        if token.path in self._paths:
            mode = f" (mode {token.metadata.mode})" if token.metadata.mode else ""
            self.skip(token.path, f"duplicate path{mode}; first occurrence kept")
            return False

        owner = self._css_owner.get(token.css_variable)
        if owner is not None:
            self.warn(
                f"{token.path}: CSS variable {token.css_variable} also generated for "
                f"{owner}; the later token wins"
            )
        self._css_owner[token.css_variable] = token.path
        self._paths.add(token.path)
        self._tokens.append(token)
        self._categories[token.category] += 1
        return True

    def __len__(self) -> int:
        return len(self._tokens)

    # ── Result ───────────────────────────────────────────────────────────────
    def build(self, format: TokenFormat, modes: tuple[str, ...] | None = None) -> ParseResult:
        """Does: Freeze the accumulated state; `modes` defaults to those seen on tokens."""
        if modes is None:
            modes = tuple(dict.fromkeys(t.metadata.mode for t in self._tokens if t.metadata.mode))
        categories = {c: self._categories[c] for c in CATEGORIES if self._categories[c]}
        result = ParseResult(
            tokens=tuple(self._tokens),
            errors=tuple(self._errors),
            warnings=tuple(self._warnings),
            metadata=ParseMetadata(
                format=format,
                total_parsed=len(self._tokens),
                total_skipped=self._skipped,
                categories=categories,
                modes=modes,
            ),
        )
        logger.debug(
            "Built result: format=%s tokens=%d skipped=%d warnings=%d",
            format, len(self._tokens), self._skipped, len(self._warnings),
        )
        return result

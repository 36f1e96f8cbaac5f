# src/token_normalizer/ingest/orchestrator.py

"""
orchestrator.py
===============

Does: Top-level token ingestion: detect the document format, run the matching
      walker, classify every leaf and aggregate the result. Pure function of
      its input; the core never raises for malformed token data.
Returns:
  - parse_tokens(raw_json, options=None) -> ParseResult
  - parse_token_file(raw_json, options=None) -> ParseResult (alias)
Used by: The import wizard, persistence upserts and export generators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from token_normalizer.ingest.aggregator import (
    UNRECOGNIZED_FORMAT,
    TokenAggregator,
    unrecognized_result,
)
from token_normalizer.ingest.classify import classify_leaf
from token_normalizer.ingest.errors import FormatError
from token_normalizer.ingest.general import detect_format
from token_normalizer.ingest.general.utils import debug
from token_normalizer.ingest.types import ParseOptions, ParseResult, TokenFormat
from token_normalizer.ingest.walkers import (
    WalkEvent,
    WalkIssue,
    list_modes,
    walk_dtcg,
    walk_flat,
    walk_style_dictionary,
)

__all__ = ["parse_tokens", "parse_token_file"]

logger = logging.getLogger(__name__)

Walker = Callable[[Any, ParseOptions], Iterator[WalkEvent]]

# ── Walker registry ───────────────────────────────────────────────────────────
_WALKERS: dict[TokenFormat, Walker] = {
    "figma-variables": lambda doc, opts: walk_dtcg(doc),
    "style-dictionary": lambda doc, opts: walk_style_dictionary(doc, mode=opts.mode),
    "flat": lambda doc, opts: walk_flat(doc),
}


def _select_walker(token_format: TokenFormat) -> Walker:
    try:
        return _WALKERS[token_format]
    except KeyError:
        raise FormatError(UNRECOGNIZED_FORMAT) from None


# ── Public entry points ───────────────────────────────────────────────────────
def parse_tokens(raw_json: Any, options: ParseOptions | None = None) -> ParseResult:
    """
    Does: Convert a decoded JSON token export into canonical tokens plus
          diagnostics (errors block an import, warnings flag single tokens).
    Returns: A fresh ParseResult; tokens keep document traversal order.
    """
    options = options or ParseOptions()
    token_format = detect_format(raw_json)
    debug(f"format={token_format}", topic="detect")

    try:
        walker = _select_walker(token_format)
    except FormatError as exc:
        logger.info("Token document not recognized: %s", exc)
        return unrecognized_result(str(exc))

    aggregator = TokenAggregator()
    try:
        for event in walker(raw_json, options):
            if isinstance(event, WalkIssue):
                debug(f"issue {event.path}: {event.reason}", topic="walk")
                aggregator.record_issue(event)
                continue
            outcome = classify_leaf(event, options)
            if outcome.token is None:
                debug(f"skip {event.path}: {outcome.skip_reason}", topic="classify")
                aggregator.skip(event.path, outcome.skip_reason or "unreadable value")
                for warning in outcome.warnings:
                    aggregator.warn(warning)
                continue
            if aggregator.add(outcome.token):
                for warning in outcome.warnings:
                    aggregator.warn(warning)
    except RecursionError:
        logger.warning("Token document nested too deeply; result is partial")
        aggregator.error("token document is nested too deeply to parse")

    modes = list_modes(raw_json) if token_format == "style-dictionary" else None
    result = aggregator.build(token_format, modes)
    debug(
        f"parsed={result.metadata.total_parsed} skipped={result.metadata.total_skipped} "
        f"categories={result.metadata.categories}",
        topic="aggregate",
    )
    return result


def parse_token_file(raw_json: Any, options: ParseOptions | None = None) -> ParseResult:
    """Does: Alias of parse_tokens, kept for callers of the older name."""
    return parse_tokens(raw_json, options)

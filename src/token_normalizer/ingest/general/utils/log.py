"""
log.py.

Does: Lightweight topic tracer controlled by TOKEN_NORMALIZER_DEBUG_TOPICS
(comma-sep or 'all'). Complements module loggers with a one-switch trace of
the parse pipeline (topics: detect, walk, classify, aggregate).
Returns: Prints timestamped lines with topic + level to stderr.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "topic_enabled"]

ENV_VAR = "TOKEN_NORMALIZER_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable TOKEN_NORMALIZER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def topic_enabled(topic: str) -> bool:
    """Does: Tell whether `topic` is switched on (an empty topic set means off)."""
    if not _DEBUG_TOPICS:
        return False
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "parse",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via TOKEN_NORMALIZER_DEBUG_TOPICS.
    """
    if not topic_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)

"""
walkers.
=======

Does: One traversal strategy per detected document format, each yielding a
      stream of leaf nodes (path, raw value, type hint, metadata) and
      WalkIssues.
Exports: walk_dtcg, walk_style_dictionary, walk_flat, list_modes and the
         node variants.
Used by: The orchestrator.
"""

from __future__ import annotations

from .dtcg import classify_dtcg_node, walk_dtcg
from .flat import classify_flat_node, walk_flat
from .nodes import (
    DtcgContainer,
    DtcgLeaf,
    FlatContainer,
    FlatLeaf,
    PATH_SEPARATOR,
    LeafNode,
    StyleDictionaryVariable,
    WalkEvent,
    WalkIssue,
    join_path,
)
from .style_dictionary import classify_variable, list_modes, walk_style_dictionary

__all__ = [
    # walkers
    "walk_dtcg",
    "walk_style_dictionary",
    "walk_flat",
    "list_modes",
    # per-node classifiers
    "classify_dtcg_node",
    "classify_variable",
    "classify_flat_node",
    # variants
    "LeafNode",
    "DtcgLeaf",
    "DtcgContainer",
    "StyleDictionaryVariable",
    "FlatLeaf",
    "FlatContainer",
    "WalkIssue",
    "WalkEvent",
    "join_path",
    "PATH_SEPARATOR",
]

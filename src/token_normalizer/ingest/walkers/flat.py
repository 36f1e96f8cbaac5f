"""
flat.py
=======

Does: Walk a plainly nested JSON object with no type markers. Primitives and
      lists are leaves; so are objects shaped like a single value
      ({value, unit}, {hex}, {r, g, b}, {components}, {shadows}) so a color's
      or dimension's own fields are never mistaken for child tokens.
      Classic {value, type, description} wrappers are unwrapped.
Returns: walk_flat() → iterator of FlatLeaf, in document order.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from token_normalizer.ingest.general.shapes import is_value_shape, is_value_wrapper
from token_normalizer.ingest.types import TokenMetadata
from token_normalizer.ingest.walkers.nodes import (
    FlatContainer,
    FlatLeaf,
    WalkEvent,
    join_path,
)

__all__ = ["classify_flat_node", "walk_flat"]


def _opt_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def classify_flat_node(path: str, value: Any) -> FlatLeaf | FlatContainer:
    """Does: Tag one child of a flat group as leaf or nested group."""
    if isinstance(value, Mapping) and not is_value_shape(value):
        return FlatContainer(path, value)
    if is_value_wrapper(value):
        hint = _opt_str(value.get("type")) or _opt_str(value.get("$type"))
        return FlatLeaf(
            path,
            value["value"],
            hint,
            TokenMetadata(description=_opt_str(value.get("description")), original_type=hint),
        )
    return FlatLeaf(path, value)


def walk_flat(document: Mapping[str, Any], prefix: str = "") -> Iterator[WalkEvent]:
    """Does: Depth-first, document-ordered traversal of a flat tree."""
    for key, value in document.items():
        node = classify_flat_node(join_path(prefix, key), value)
        if isinstance(node, FlatContainer):
            yield from walk_flat(node.children, node.path)
        else:
            yield node

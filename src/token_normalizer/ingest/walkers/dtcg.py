"""
dtcg.py
=======

Does: Walk a Figma Variables / DTCG document. A node carrying `$value` is a
      leaf; other objects are groups whose key extends the path. Keys starting
      with '$' inside groups are metadata and never become tokens. A group-level
      `$type` is inherited by descendants that do not declare their own.
Returns: walk_dtcg() → iterator of DtcgLeaf / WalkIssue, in document order.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from token_normalizer.ingest.types import TokenMetadata
from token_normalizer.ingest.walkers.nodes import (
    DtcgContainer,
    DtcgLeaf,
    WalkEvent,
    WalkIssue,
    join_path,
)

__all__ = ["FIGMA_VARIABLE_ID", "FIGMA_MODE_NAME", "classify_dtcg_node", "walk_dtcg"]

FIGMA_VARIABLE_ID = "com.figma.variableId"
FIGMA_MODE_NAME = "com.figma.modeName"


def _opt_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _leaf_metadata(node: Mapping[str, Any], type_hint: str | None) -> TokenMetadata:
    extensions = node.get("$extensions")
    if not isinstance(extensions, Mapping):
        extensions = {}
    return TokenMetadata(
        figma_id=_opt_str(extensions.get(FIGMA_VARIABLE_ID)),
        mode=_opt_str(extensions.get(FIGMA_MODE_NAME)),
        description=_opt_str(node.get("$description")),
        original_type=type_hint,
    )


def classify_dtcg_node(
    path: str, node: Any, inherited_type: str | None = None
) -> DtcgLeaf | DtcgContainer | None:
    """Does: Tag one child of a DTCG group; None for values that are neither."""
    if not isinstance(node, Mapping):
        return None
    own_type = _opt_str(node.get("$type"))
    if "$value" in node:
        hint = own_type or inherited_type
        return DtcgLeaf(path, node["$value"], hint, _leaf_metadata(node, hint))
    return DtcgContainer(path, node, own_type or inherited_type)


def walk_dtcg(
    document: Mapping[str, Any], prefix: str = "", inherited_type: str | None = None
) -> Iterator[WalkEvent]:
    """Does: Depth-first, document-ordered traversal of a DTCG tree."""
    for key, child in document.items():
        if str(key).startswith("$"):
            continue
        path = join_path(prefix, key)
        node = classify_dtcg_node(path, child, inherited_type)
        if node is None:
            yield WalkIssue(path, f"not a token or group ({type(child).__name__})")
        elif isinstance(node, DtcgContainer):
            yield from walk_dtcg(node.children, node.path, node.inherited_type)
        else:
            yield node

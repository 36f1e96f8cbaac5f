"""
style_dictionary.py
===================

Does: Walk a collections[].modes[].variables[] export (Figma variables as
      exported by Style-Dictionary style plugins). The variable name is the
      token path; collection and mode names ride along in metadata.
Returns: walk_style_dictionary() → iterator of StyleDictionaryVariable /
         WalkIssue; list_modes() → ordered, de-duplicated mode names.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from token_normalizer.ingest.general.format_detection import find_collections
from token_normalizer.ingest.types import TokenMetadata
from token_normalizer.ingest.walkers.nodes import (
    StyleDictionaryVariable,
    WalkEvent,
    WalkIssue,
    join_path,
)

__all__ = ["DEFAULT_NAME", "classify_variable", "list_modes", "walk_style_dictionary"]

DEFAULT_NAME = "Default"


def _name_of(obj: Mapping[str, Any]) -> str:
    name = obj.get("name")
    return name if isinstance(name, str) and name.strip() else DEFAULT_NAME


def classify_variable(
    collection: str, mode: str, variable: Any
) -> StyleDictionaryVariable | WalkIssue:
    """Does: Tag one variables[] entry, or explain why it cannot be a token."""
    where = join_path(collection, mode)
    if not isinstance(variable, Mapping):
        return WalkIssue(where, f"variable entry is not an object ({type(variable).__name__})")
    path = variable.get("name")
    if not isinstance(path, str) or not path.strip():
        return WalkIssue(where, "variable has no name")
    hint = variable.get("type") or variable.get("resolvedType")
    hint = hint if isinstance(hint, str) else None
    figma_id = variable.get("id")
    description = variable.get("description")
    return StyleDictionaryVariable(
        path=path.strip(),
        value=variable.get("value"),
        type_hint=hint,
        metadata=TokenMetadata(
            figma_id=figma_id if isinstance(figma_id, str) and figma_id else None,
            collection=collection,
            mode=mode,
            description=description if isinstance(description, str) and description else None,
            original_type=hint,
        ),
    )


def _walk_mode(collection: str, mode: Any) -> Iterator[WalkEvent]:
    if not isinstance(mode, Mapping):
        yield WalkIssue(collection, "mode entry is not an object", skipped=False)
        return
    mode_name = _name_of(mode)
    variables = mode.get("variables")
    if not isinstance(variables, list):
        yield WalkIssue(join_path(collection, mode_name), "mode has no variables", skipped=False)
        return
    for variable in variables:
        yield classify_variable(collection, mode_name, variable)


def walk_style_dictionary(document: Any, *, mode: str | None = None) -> Iterator[WalkEvent]:
    """
    Does: Iterate collections → modes → variables in document order.
          With `mode`, only modes of that name (case-insensitive) are walked.
    """
    for collection in find_collections(document) or []:
        if not isinstance(collection, Mapping):
            yield WalkIssue("collections", "collection entry is not an object", skipped=False)
            continue
        collection_name = _name_of(collection)
        modes = collection.get("modes")
        if not isinstance(modes, list):
            yield WalkIssue(collection_name, "collection has no modes", skipped=False)
            continue
        if mode is not None:
            wanted = mode.strip().lower()
            modes = [m for m in modes if isinstance(m, Mapping) and _name_of(m).lower() == wanted]
            if not modes:
                yield WalkIssue(collection_name, f"collection has no mode named {mode!r}", skipped=False)
                continue
        for m in modes:
            yield from _walk_mode(collection_name, m)


def list_modes(document: Any) -> tuple[str, ...]:
    """Does: Collect mode names across collections, first-seen order."""
    seen: dict[str, None] = {}
    for collection in find_collections(document) or []:
        if not isinstance(collection, Mapping) or not isinstance(collection.get("modes"), list):
            continue
        for m in collection["modes"]:
            if isinstance(m, Mapping):
                seen.setdefault(_name_of(m), None)
    return tuple(seen)

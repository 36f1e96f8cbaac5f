"""
nodes.py.

Does: Tagged node variants produced while walking a token document:
      DtcgLeaf | DtcgContainer | StyleDictionaryVariable | FlatLeaf | FlatContainer,
      plus WalkIssue for structural problems found on the way.
      Leaf variants share one shape (path, value, type_hint, metadata) so
      classification does not care which schema produced them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from token_normalizer.ingest.types import TokenMetadata

__all__ = [
    "PATH_SEPARATOR",
    "join_path",
    "LeafNode",
    "DtcgLeaf",
    "DtcgContainer",
    "StyleDictionaryVariable",
    "FlatLeaf",
    "FlatContainer",
    "WalkIssue",
    "WalkEvent",
]

PATH_SEPARATOR = "/"


def join_path(prefix: str, key: Any) -> str:
    key = str(key)
    return f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key


@dataclass(frozen=True)
class LeafNode:
    path: str
    value: Any
    type_hint: str | None = None
    metadata: TokenMetadata = field(default_factory=TokenMetadata)


@dataclass(frozen=True)
class DtcgLeaf(LeafNode):
    """Object carrying `$value` (and its own or an inherited `$type`)."""


@dataclass(frozen=True)
class StyleDictionaryVariable(LeafNode):
    """One entry of collections[].modes[].variables[]."""


@dataclass(frozen=True)
class FlatLeaf(LeafNode):
    """Primitive, list, or value-shaped object in a plain nested document."""


@dataclass(frozen=True)
class DtcgContainer:
    path: str
    children: Mapping[str, Any]
    inherited_type: str | None = None


@dataclass(frozen=True)
class FlatContainer:
    path: str
    children: Mapping[str, Any]


@dataclass(frozen=True)
class WalkIssue:
    """A structural problem; `skipped` marks a lost leaf rather than a notice."""

    path: str
    reason: str
    skipped: bool = True


WalkEvent = Union[LeafNode, WalkIssue]

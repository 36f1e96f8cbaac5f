# token_normalizer/ingest/types.py
"""
types.py.
========

Does: Define the canonical, immutable token model (Token, typed value payloads,
      ParseResult) plus the closed category/type/format vocabularies.
Returns: Frozen dataclasses with JSON-ready `as_dict()` views.
Used by: Walkers, leaf classification, the aggregator, and every downstream
         consumer (persistence, CSS injection, export generators).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, NamedTuple, Union

__all__ = [
    "Category",
    "TokenType",
    "TokenFormat",
    "CATEGORIES",
    "TOKEN_TYPES",
    "TOKEN_FORMATS",
    "RGB",
    "ColorValue",
    "DimensionValue",
    "ShadowLayer",
    "ShadowValue",
    "TokenValue",
    "TokenMetadata",
    "Token",
    "ParseMetadata",
    "ParseResult",
    "ParseOptions",
]
__docformat__ = "google"

# ── Closed vocabularies ──────────────────────────────────────────────────────
Category = Literal["color", "typography", "spacing", "shadow", "radius", "grid", "other"]
TokenType = Literal[
    "color", "dimension", "duration", "number", "boolean", "fontFamily", "shadow", "string"
]
TokenFormat = Literal["figma-variables", "style-dictionary", "flat", "unknown"]

CATEGORIES: tuple[Category, ...] = (
    "color", "typography", "spacing", "shadow", "radius", "grid", "other",
)
TOKEN_TYPES: tuple[TokenType, ...] = (
    "color", "dimension", "duration", "number", "boolean", "fontFamily", "shadow", "string",
)
TOKEN_FORMATS: tuple[TokenFormat, ...] = (
    "figma-variables", "style-dictionary", "flat", "unknown",
)


# ── Value payloads ───────────────────────────────────────────────────────────
class RGB(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class ColorValue:
    """Canonical color: hex string, integer sRGB channels, opacity in [0, 1].

    An empty `hex` marks the "no value defined" sentinel (see `defined`).
    """

    hex: str
    rgb: RGB
    opacity: float = 1.0

    @property
    def defined(self) -> bool:
        return bool(self.hex)

    def as_dict(self) -> dict[str, Any]:
        return {"hex": self.hex, "rgb": self.rgb._asdict(), "opacity": self.opacity}


@dataclass(frozen=True)
class DimensionValue:
    value: int | float
    unit: str

    def as_dict(self) -> dict[str, Any]:
        return {"value": self.value, "unit": self.unit}


@dataclass(frozen=True)
class ShadowLayer:
    x: int | float
    y: int | float
    blur: int | float
    spread: int | float
    color: str
    inset: bool = False

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "x": self.x,
            "y": self.y,
            "blur": self.blur,
            "spread": self.spread,
            "color": self.color,
        }
        if self.inset:
            out["inset"] = True
        return out


@dataclass(frozen=True)
class ShadowValue:
    shadows: tuple[ShadowLayer, ...]

    def as_dict(self) -> dict[str, Any]:
        return {"shadows": [s.as_dict() for s in self.shadows]}


TokenValue = Union[ColorValue, DimensionValue, ShadowValue, tuple, int, float, bool, str]


def _value_as_json(value: TokenValue) -> Any:
    if isinstance(value, (ColorValue, DimensionValue, ShadowValue)):
        return value.as_dict()
    if isinstance(value, tuple):
        return list(value)
    return value


# ── Token ────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class TokenMetadata:
    """Source-format details carried through untouched."""

    figma_id: str | None = None
    collection: str | None = None
    mode: str | None = None
    description: str | None = None
    original_type: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if v is not None}


@dataclass(frozen=True)
class Token:
    path: str
    name: str
    category: Category
    type: TokenType
    value: TokenValue
    css_variable: str
    metadata: TokenMetadata = field(default_factory=TokenMetadata)

    def as_dict(self) -> dict[str, Any]:
        """Does: JSON-ready row, as read by the persistence layer."""
        return {
            "path": self.path,
            "name": self.name,
            "category": self.category,
            "type": self.type,
            "value": _value_as_json(self.value),
            "css_variable": self.css_variable,
            "metadata": self.metadata.as_dict(),
        }


# ── Parse result ─────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ParseMetadata:
    format: TokenFormat
    total_parsed: int = 0
    total_skipped: int = 0
    categories: dict[str, int] = field(default_factory=dict)
    modes: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "total_parsed": self.total_parsed,
            "total_skipped": self.total_skipped,
            "categories": dict(self.categories),
            "modes": list(self.modes),
        }


@dataclass(frozen=True)
class ParseResult:
    tokens: tuple[Token, ...]
    errors: tuple[str, ...]
    warnings: tuple[str, ...]
    metadata: ParseMetadata

    def by_css_variable(self) -> dict[str, Token]:
        """Does: Index tokens by CSS variable; on collision the last token wins."""
        return {t.css_variable: t for t in self.tokens}

    def as_dict(self) -> dict[str, Any]:
        return {
            "tokens": [t.as_dict() for t in self.tokens],
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "metadata": self.metadata.as_dict(),
        }


# ── Options ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ParseOptions:
    """Per-call knobs for `parse_tokens`.

    Attributes:
        mode: Only emit this mode from multi-mode (style-dictionary) exports.
            Matched case-insensitively. None emits every mode.
        default_unit: Unit given to unitless dimension values.
        warn_uncategorized: Record a warning for tokens that fall back to
            category "other".
        data_dir: Override the directory holding the keyword/alias tables.
    """

    mode: str | None = None
    default_unit: str = "px"
    warn_uncategorized: bool = True
    data_dir: Path | None = None

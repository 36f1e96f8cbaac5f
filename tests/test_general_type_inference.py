# tests/test_general_type_inference.py
"""
type inference tests
====================

Does: Check declared-type resolution (canonical names, aliases, custom alias
      tables) and the ordered value-shape rules.
"""

from __future__ import annotations

import importlib
import json

import pytest

ti = importlib.import_module("token_normalizer.ingest.general.type_inference")


# ──────────────────────────────────────────────────────────────────────────────
# Value-shape rules
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "value, expected",
    [
        ("#fff", "color"),
        ("#657E79", "color"),
        ("rgba(0,0,0,.5)", "color"),
        ("hsl(1, 2%, 3%)", "color"),
        ("16px", "dimension"),
        ("1.5rem", "dimension"),
        ("50%", "dimension"),
        ("-2px", "dimension"),
        ("200ms", "duration"),
        ("0.3s", "duration"),
        (True, "boolean"),
        (False, "boolean"),
        (1, "number"),
        (1.5, "number"),
        (["Inter", "sans-serif"], "fontFamily"),
        ({"shadows": []}, "shadow"),
        ({"blur": 4, "color": "#000"}, "shadow"),
        ({"r": 1, "g": 1, "b": 1}, "color"),
        ({"components": [0, 0, 0]}, "color"),
        ({"value": 4, "unit": "px"}, "dimension"),
        ("16", "string"),
        ("hello", "string"),
        ([], "string"),
        ([1, 2], "string"),
        (None, "string"),
    ],
)
def test_detect_type(value, expected):
    assert ti.detect_type(value) == expected


def test_boolean_rule_precedes_number_rule():
    types_in_order = [t for _, t in ti.VALUE_RULES]
    assert types_in_order.index("boolean") < types_in_order.index("number")


# ──────────────────────────────────────────────────────────────────────────────
# Declared types
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "hint, expected",
    [
        ("color", "color"),
        ("COLOR", "color"),
        ("fontFamily", "fontFamily"),
        ("fontfamily", "fontFamily"),
        ("FLOAT", "number"),
        ("fontFamilies", "fontFamily"),
        ("boxShadow", "shadow"),
        ("spacing", "dimension"),
        ("borderRadius", "dimension"),
        ("BOOLEAN", "boolean"),
        ("mystery", None),
        ("", None),
        (None, None),
        (3, None),
    ],
)
def test_resolve_type_hint(hint, expected):
    assert ti.resolve_type_hint(hint) == expected


def test_declared_type_wins_over_value_shape():
    assert ti.infer_type("16px", "string") == "string"
    assert ti.infer_type(1, "FLOAT") == "number"


def test_unknown_hint_falls_back_to_value_shape():
    assert ti.infer_type("16px", "mystery") == "dimension"
    assert ti.infer_type("#000", None) == "color"


def test_custom_alias_table(tmp_path):
    (tmp_path / "type_aliases.json").write_text(json.dumps({"Size": "DIMENSION"}), encoding="utf-8")
    assert ti.resolve_type_hint("size", data_dir=tmp_path) == "dimension"
    assert ti.resolve_type_hint("float", data_dir=tmp_path) is None

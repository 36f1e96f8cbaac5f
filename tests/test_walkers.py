# tests/test_walkers.py
"""
walker tests
============

Does: Exercise each tagged node variant and the three per-format walkers in
      isolation (document order, metadata, type inheritance, issues).
"""

from __future__ import annotations

import importlib

import pytest

walkers = importlib.import_module("token_normalizer.ingest.walkers")


def _leaves(events):
    return [e for e in events if isinstance(e, walkers.LeafNode)]


def _issues(events):
    return [e for e in events if isinstance(e, walkers.WalkIssue)]


# ──────────────────────────────────────────────────────────────────────────────
# Paths
# ──────────────────────────────────────────────────────────────────────────────
def test_join_path():
    assert walkers.join_path("", "color") == "color"
    assert walkers.join_path("color", 500) == "color/500"
    assert walkers.PATH_SEPARATOR == "/"


# ──────────────────────────────────────────────────────────────────────────────
# DTCG
# ──────────────────────────────────────────────────────────────────────────────
def test_classify_dtcg_node_variants():
    leaf = walkers.classify_dtcg_node("a", {"$value": 1}, "number")
    assert isinstance(leaf, walkers.DtcgLeaf)
    assert leaf.type_hint == "number"

    group = walkers.classify_dtcg_node("a", {"$type": "color", "b": {}}, None)
    assert isinstance(group, walkers.DtcgContainer)
    assert group.inherited_type == "color"

    assert walkers.classify_dtcg_node("a", 5) is None


def test_walk_dtcg_order_inheritance_and_metadata(sample_documents):
    events = list(walkers.walk_dtcg(sample_documents["figma_variables"]))
    assert not _issues(events)
    leaves = _leaves(events)
    assert [leaf.path for leaf in leaves] == [
        "color/brand/primary",
        "color/brand/overlay",
        "spacing/sm",
        "spacing/lg",
        "radius/md",
        "typography/family/body",
        "shadow/card",
        "motion/fast",
    ]
    primary, overlay = leaves[0], leaves[1]
    assert primary.type_hint == "color"
    assert overlay.type_hint == "color"
    assert primary.metadata.figma_id == "VariableID:1:2"
    assert primary.metadata.mode == "Light"
    assert primary.metadata.description == "Main brand color"


def test_walk_dtcg_skips_dollar_keys_and_reports_non_objects():
    doc = {"$schema": "x", "grp": {"$description": "d", "bad": 5, "ok": {"$type": "number", "$value": 2}}}
    events = list(walkers.walk_dtcg(doc))
    assert [leaf.path for leaf in _leaves(events)] == ["grp/ok"]
    (issue,) = _issues(events)
    assert issue.path == "grp/bad"
    assert issue.skipped is True


# ──────────────────────────────────────────────────────────────────────────────
# Style Dictionary
# ──────────────────────────────────────────────────────────────────────────────
def test_walk_style_dictionary_all_modes(sample_documents):
    leaves = _leaves(walkers.walk_style_dictionary(sample_documents["style_dictionary"]))
    assert [(v.path, v.metadata.mode) for v in leaves] == [
        ("color/surface/background", "Default"),
        ("space/gutter", "Default"),
        ("color/surface/background", "Dark"),
        ("space/gutter", "Dark"),
    ]
    first = leaves[0]
    assert isinstance(first, walkers.StyleDictionaryVariable)
    assert first.metadata.collection == "Theme"
    assert first.metadata.figma_id == "VariableID:9:1"
    assert leaves[1].type_hint == "float"
    assert leaves[1].metadata.description == "Page gutter"


def test_walk_style_dictionary_mode_filter(sample_documents):
    doc = sample_documents["style_dictionary"]
    leaves = _leaves(walkers.walk_style_dictionary(doc, mode="dark"))
    assert {v.metadata.mode for v in leaves} == {"Dark"}
    assert len(leaves) == 2

    events = list(walkers.walk_style_dictionary(doc, mode="Sepia"))
    (issue,) = events
    assert issue.skipped is False
    assert "Sepia" in issue.reason


def test_list_modes(sample_documents):
    assert walkers.list_modes(sample_documents["style_dictionary"]) == ("Default", "Dark")
    assert walkers.list_modes({"nothing": 1}) == ()


@pytest.mark.parametrize("variable", [{"value": 1}, {"name": "  ", "value": 1}, "oops"])
def test_classify_variable_without_name(variable):
    issue = walkers.classify_variable("Theme", "Default", variable)
    assert isinstance(issue, walkers.WalkIssue)
    assert issue.path == "Theme/Default"
    assert issue.skipped is True


def test_classify_variable_resolved_type_fallback():
    var = walkers.classify_variable("C", "M", {"name": "a/b", "resolvedType": "COLOR", "value": "#fff"})
    assert var.type_hint == "COLOR"
    assert var.metadata.original_type == "COLOR"


# ──────────────────────────────────────────────────────────────────────────────
# Flat
# ──────────────────────────────────────────────────────────────────────────────
def test_walk_flat(sample_documents):
    leaves = list(walkers.walk_flat(sample_documents["flat"]))
    assert all(isinstance(leaf, walkers.FlatLeaf) for leaf in leaves)
    by_path = {leaf.path: leaf for leaf in leaves}
    assert list(by_path) == [
        "colors/text",
        "colors/accent",
        "font/family",
        "font/weight",
        "radius/pill",
        "grid/columns",
        "gap/xs",
    ]
    assert by_path["radius/pill"].value == {"value": 999, "unit": "px"}
    wrapped = by_path["gap/xs"]
    assert wrapped.value == "4px"
    assert wrapped.type_hint == "spacing"
    assert wrapped.metadata.description == "Old gap"


def test_classify_flat_node_variants():
    assert isinstance(walkers.classify_flat_node("a", {"b": 1}), walkers.FlatContainer)
    assert isinstance(walkers.classify_flat_node("a", {"hex": "#fff"}), walkers.FlatLeaf)
    assert walkers.classify_flat_node("a", ["Inter"]).value == ["Inter"]

# tests/test_general_css_variable.py
"""CSS custom-property synthesis: kebab-casing, folding, fallbacks, determinism."""

from __future__ import annotations

import importlib

import pytest

cssv = importlib.import_module("token_normalizer.ingest.general.css_variable")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("Color/Primary/500", "--color-primary-500"),
        ("Spacing/md", "--spacing-md"),
        ("font.size_large", "--font-size-large"),
        ("  Brand / Açaí  ", "--brand-acai"),
        ("a--b", "--a-b"),
        ("Button/Hover (Dark)", "--button-hover-dark"),
        ("-leading/trailing-", "--leading-trailing"),
    ],
)
def test_generate_css_variable(path, expected):
    assert cssv.generate_css_variable(path) == expected


@pytest.mark.parametrize("path", ["", "🎨", "///", "   ", "(!)"])
def test_paths_without_usable_characters_fall_back(path):
    assert cssv.generate_css_variable(path) == f"--{cssv.FALLBACK_BODY}"


@pytest.mark.parametrize(
    "path",
    ["Color/Primary/500", "x", "UPPER CASE/with.dots", "émoji 🎨 name", "a//b..c__d", "--already--"],
)
def test_output_is_always_well_formed_and_deterministic(path):
    first = cssv.generate_css_variable(path)
    assert cssv.is_valid_css_variable(first)
    assert "--" not in first[2:]
    assert cssv.generate_css_variable(path) == first


def test_is_valid_css_variable_rejects_bad_names():
    assert cssv.is_valid_css_variable("--ok-name-1")
    for bad in ("ok", "--Bad", "--a--b", "--", "--trailing-", None):
        assert not cssv.is_valid_css_variable(bad)

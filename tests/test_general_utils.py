# tests/test_general_utils.py
"""End-to-end tests for general utils (load_config, log) with cache/env handling."""

from __future__ import annotations

import json
import os
from importlib import import_module
from pathlib import Path

import pytest

LC = import_module("token_normalizer.ingest.general.utils.load_config")
LOG = import_module("token_normalizer.ingest.general.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via TOKEN_NORMALIZER_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv(LC.DATA_DIR_ENV_VAR, str(data))
    clear_config_cache()
    return data


def _bump_mtime(path: Path) -> None:
    st = path.stat()
    os.utime(path, (st.st_atime, st.st_mtime + 10))


def _upper_keys(d: dict) -> dict:
    return {k.upper(): v for k, v in d.items()}


# ---------- load_config tests ----------
def test_load_config_validates_and_caches(tmp_data_dir):
    p = tmp_data_dir / "units.json"
    p.write_text(json.dumps({"px": 1}), encoding="utf-8")

    out1 = load_config("units", validator=_upper_keys)
    assert out1 == {"PX": 1}
    assert load_config("units", validator=_upper_keys) is out1  # cached

    p.write_text(json.dumps({"rem": 16}), encoding="utf-8")
    _bump_mtime(p)
    assert load_config("units", validator=_upper_keys) == {"REM": 16}


def test_load_config_errors(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def failing(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError):
        load_config("settings", validator=failing)

    (tmp_data_dir / "listy.json").write_text(json.dumps(["not", "an", "object"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("listy")

    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_explicit_base_dir_beats_env(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "pick.json").write_text(json.dumps({"from": "explicit"}), encoding="utf-8")
    (tmp_data_dir / "pick.json").write_text(json.dumps({"from": "env"}), encoding="utf-8")
    assert load_config("pick") == {"from": "env"}
    assert load_config("pick", base_dir=other) == {"from": "explicit"}


def test_packaged_tables_are_found_without_env():
    table = load_config("category_keywords")
    assert "color" in table and "radius" in table


def test_unrelated_data_dir_env_is_ignored(tmp_path, monkeypatch):
    from token_normalizer import parse_tokens

    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    clear_config_cache()
    assert "float" in load_config("type_aliases")

    result = parse_tokens({"color": {"a": "#fff"}})
    assert [t.category for t in result.tokens] == ["color"]



# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("TOKEN_NORMALIZER_DEBUG_TOPICS", "walk")
    LOG.reload_topics()

    LOG.debug("hello on walk", topic="walk")
    LOG.debug("should be silent", topic="detect")

    captured = capsys.readouterr()
    assert "hello on walk" in captured.err
    assert "[walk][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("TOKEN_NORMALIZER_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="info")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][INFO] m2" in captured.err


def test_log_debug_silent_by_default(capsys):
    assert LOG.topic_enabled("detect") is False
    LOG.debug("quiet", topic="detect")
    assert capsys.readouterr().err == ""


def test_parse_pipeline_traces_topics(monkeypatch, capsys):
    from token_normalizer import parse_tokens

    monkeypatch.setenv("TOKEN_NORMALIZER_DEBUG_TOPICS", "detect,aggregate")
    LOG.reload_topics()
    parse_tokens({"spacing": {"md": "16px"}})

    err = capsys.readouterr().err
    assert "format=flat" in err
    assert "parsed=1" in err

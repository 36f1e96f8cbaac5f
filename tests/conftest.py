# tests/conftest.py
"""Shared fixtures: sample token exports and a clean config/debug environment."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from token_normalizer.ingest.general.utils import clear_config_cache, reload_topics

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def _sample_documents() -> dict:
    with (FIXTURES / "sample_tokens.json").open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_documents(_sample_documents) -> dict:
    """Does: Fresh deep copy per test so no test can leak mutations."""
    return copy.deepcopy(_sample_documents)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Use the packaged data tables and keep the topic tracer silent."""
    for var in ("TOKEN_NORMALIZER_DATA_DIR", "DATA_DIR", "TOKEN_NORMALIZER_DEBUG_TOPICS"):
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    reload_topics()
    yield
    clear_config_cache()

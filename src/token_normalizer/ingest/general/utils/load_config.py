# src/token_normalizer/ingest/general/utils/load_config.py

"""Load the JSON lookup tables (category keywords, type aliases) from <data/>.

Every table is a JSON object. A caller-supplied validator turns it into the
typed mapping the caller needs; the validated result is cached per
(path, mtime, validator) so edits to a table are picked up without restart.

Data directory precedence: explicit `base_dir` (ParseOptions.data_dir) >
TOKEN_NORMALIZER_DATA_DIR > the packaged `token_normalizer/data/`.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV_VAR",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VAR = "TOKEN_NORMALIZER_DATA_DIR"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when the packaged 'data' directory is missing from the install."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested table cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when a table is not valid JSON or its validator rejects it."""


class ConfigTypeError(TypeError):
    """Raise when a table's top-level JSON value is not an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# (path, mtime, validator identity)
_CONFIG_CACHE: dict[tuple[Path, float, int], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory table cache (pytest, hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _packaged_data_dir() -> Path:
    """token_normalizer/data, three levels above this module."""
    data = Path(__file__).resolve().parents[3] / "data"
    if not data.is_dir():
        raise DataDirNotFound(f"Packaged data directory missing: {data}")
    return data


def _resolve_data_dir(base_dir: Path | str | None) -> Path:
    if base_dir is not None:
        return Path(base_dir).expanduser().resolve()
    env = os.environ.get(DATA_DIR_ENV_VAR)
    if env:
        return Path(env).expanduser().resolve()
    return _packaged_data_dir()


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | str | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, run `validator` on it, and cache the result."""
    data_dir = _resolve_data_dir(base_dir)

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    cache_key = (path, mtime, id(validator))
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except (ValueError, TypeError) as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
    return data

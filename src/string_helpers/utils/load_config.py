# src/string_helpers/utils/load_config.py

"""Read JSON5 data files shipped under string_helpers/data/.

Does: Resolve <data>/<name>.json5, parse it with json5 (comments and trailing
      commas allowed), check it is an object, and run an optional validator.
Returns: dict[str, Any]. Parsed files are cached per (path, mtime).
Used by: Delimiter presets.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

import json5

__all__ = [
    "DATA_DIR",
    "load_config",
    "clear_config_cache",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
SUFFIX = ".json5"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when a data file does not exist or cannot be read."""


class ConfigParseError(ValueError):
    """Raise when a data file is not valid JSON5 or its validator rejects it."""


class ConfigTypeError(TypeError):
    """Raise when a data file parses but has the wrong shape."""


# ── Parsing & cache ──────────────────────────────────────────────────────────
@lru_cache(maxsize=32)
def _parse(path: Path, mtime_ns: int) -> Any:
    # mtime_ns is only part of the cache key
    log.debug("parsing %s", path.name)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json5.load(f)
    except ValueError as e:
        raise ConfigParseError(f"Cannot parse {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def clear_config_cache() -> None:
    """Drop every cached parse (tests, hot reload)."""
    _parse.cache_clear()


def load_config(
    name: str,
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <base_dir or DATA_DIR>/<name>.json5 as a dict, validated if asked."""
    path = Path(base_dir or DATA_DIR) / (name if name.endswith(SUFFIX) else name + SUFFIX)
    if not path.is_file():
        raise ConfigFileNotFound(f"Data file not found: {path}")

    data = _parse(path.resolve(), path.stat().st_mtime_ns)
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")

    # cached object stays untouched by validators
    data = dict(data)
    if validator is None:
        return data
    try:
        return validator(data)
    except (ConfigTypeError, ConfigParseError):
        raise
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

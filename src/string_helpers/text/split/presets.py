# string_helpers/text/split/presets.py
"""
presets.

Does: Load named delimiter sets from <data>/delimiters.json5 and split with them.
Returns: load_presets() → dict[name → frozenset[char]], split_on_preset() → list[str].
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from string_helpers.text.split.split_core import split_on_delimiters
from string_helpers.utils.load_config import ConfigTypeError, load_config

__all__ = ["PRESETS_FILE", "PresetNotFound", "load_presets", "split_on_preset"]

log = logging.getLogger(__name__)

PRESETS_FILE = "delimiters"


class PresetNotFound(KeyError):
    """Raise when a delimiter preset name is not defined."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


def _validate_presets(data: dict[str, Any]) -> dict[str, Any]:
    for name, chars in data.items():
        if not isinstance(chars, list):
            raise ConfigTypeError(f"preset {name!r}: expected list, got {type(chars).__name__}")
        bad = [c for c in chars if not isinstance(c, str) or len(c) != 1]
        if bad:
            raise ConfigTypeError(f"preset {name!r}: non single-character entries {bad[:3]!r}")
    return data


def load_presets(base_dir: Path | None = None) -> dict[str, frozenset[str]]:
    """Does: Read and validate every preset. Returns: name → frozenset of delimiters."""
    raw = load_config(PRESETS_FILE, base_dir=base_dir, validator=_validate_presets)
    return {name: frozenset(chars) for name, chars in raw.items()}


def split_on_preset(text: str, name: str, *, base_dir: Path | None = None) -> list[str]:
    """
    Does: split_on_delimiters() with the delimiter set stored under `name`.
    Returns: Non-empty segments.
    """
    presets = load_presets(base_dir)
    try:
        delimiters = presets[name]
    except KeyError as e:
        raise PresetNotFound(
            f"Unknown delimiter preset {name!r} (known: {', '.join(sorted(presets))})"
        ) from e
    log.debug("split_on_preset: %s → %d delimiters", name, len(delimiters))
    return split_on_delimiters(text, delimiters)

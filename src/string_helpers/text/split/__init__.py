# string_helpers/text/split/__init__.py
"""
split
=====

Does: Expose public delimiter-splitting utilities and delimiter presets.
Exports: split_on_delimiters, split_keeping_delimiter, split_into_n_parts,
         their generator forms, count_expected_segments, split_on_preset, load_presets
"""

from .presets import (
    PresetNotFound,
    load_presets,
    split_on_preset,
)
from .split_core import (
    count_expected_segments,
    iter_split_keeping_delimiter,
    iter_split_on_delimiters,
    split_into_n_parts,
    split_keeping_delimiter,
    split_on_delimiters,
)

__all__ = [
    "split_on_delimiters",
    "iter_split_on_delimiters",
    "split_keeping_delimiter",
    "iter_split_keeping_delimiter",
    "count_expected_segments",
    "split_into_n_parts",
    "split_on_preset",
    "load_presets",
    "PresetNotFound",
]

# string_helpers/text/__init__.py
"""
text.
=====

Does: Provide the code-point level text helpers.
Exports: is_palindrome, count_chars, string_reverse, the split family,
         decode_text, trim_common_prefix/suffix, and their errors.
"""

from __future__ import annotations

from .affix import (
    trim_common_prefix,
    trim_common_suffix,
)
from .basic import (
    count_chars,
    is_palindrome,
    string_reverse,
)
from .decode import (
    InvalidTextEncoding,
    decode_text,
)
from .split import (
    PresetNotFound,
    count_expected_segments,
    iter_split_keeping_delimiter,
    iter_split_on_delimiters,
    load_presets,
    split_into_n_parts,
    split_keeping_delimiter,
    split_on_delimiters,
    split_on_preset,
)
from .validation import DelimiterError

__all__ = [
    # basic
    "is_palindrome",
    "count_chars",
    "string_reverse",
    # split
    "split_on_delimiters",
    "iter_split_on_delimiters",
    "split_keeping_delimiter",
    "iter_split_keeping_delimiter",
    "count_expected_segments",
    "split_into_n_parts",
    "split_on_preset",
    "load_presets",
    # boundary / affixes
    "decode_text",
    "trim_common_prefix",
    "trim_common_suffix",
    # errors
    "DelimiterError",
    "InvalidTextEncoding",
    "PresetNotFound",
]

"""
string_helpers
==============

Does: Root package for the string helpers: palindrome/count/reverse and the
      delimiter-splitting family.
Returns: Re-exports the public API of `string_helpers.text`.
"""

from .text import (
    DelimiterError,
    InvalidTextEncoding,
    PresetNotFound,
    count_chars,
    count_expected_segments,
    decode_text,
    is_palindrome,
    iter_split_keeping_delimiter,
    iter_split_on_delimiters,
    load_presets,
    split_into_n_parts,
    split_keeping_delimiter,
    split_on_delimiters,
    split_on_preset,
    string_reverse,
    trim_common_prefix,
    trim_common_suffix,
)

__all__ = [
    "is_palindrome",
    "count_chars",
    "string_reverse",
    "split_on_delimiters",
    "iter_split_on_delimiters",
    "split_keeping_delimiter",
    "iter_split_keeping_delimiter",
    "count_expected_segments",
    "split_into_n_parts",
    "split_on_preset",
    "load_presets",
    "decode_text",
    "trim_common_prefix",
    "trim_common_suffix",
    "DelimiterError",
    "InvalidTextEncoding",
    "PresetNotFound",
]
__docformat__ = "google"

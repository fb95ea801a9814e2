# string_helpers/text/affix.py
"""
affix.

Does: Strip the longest prefix or suffix shared by every string in a group.
Returns: trim_common_prefix(), trim_common_suffix() → new lists.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

__all__ = ["common_prefix", "common_suffix", "trim_common_prefix", "trim_common_suffix"]


def common_prefix(strings: Sequence[str]) -> str:
    if not strings:
        return ""
    return os.path.commonprefix(list(strings))


def common_suffix(strings: Sequence[str]) -> str:
    if not strings:
        return ""
    return os.path.commonprefix([s[::-1] for s in strings])[::-1]


def trim_common_prefix(strings: Sequence[str]) -> list[str]:
    """
    Does: Remove the shared leading code points from each string.
    Returns: New list; fewer than two strings are returned unchanged.

    >>> trim_common_prefix(["unhappy", "unhealthy"])
    ['appy', 'ealthy']
    """
    if len(strings) < 2:
        return list(strings)
    n = len(common_prefix(strings))
    return [s[n:] for s in strings]


def trim_common_suffix(strings: Sequence[str]) -> list[str]:
    """Does: Remove the shared trailing code points from each string (see trim_common_prefix)."""
    if len(strings) < 2:
        return list(strings)
    n = len(common_suffix(strings))
    return [s[: len(s) - n] for s in strings]

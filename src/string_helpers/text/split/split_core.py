# string_helpers/text/split/split_core.py

"""
split_core.py.

Does: Delimiter-based splitting variants: split on any of several delimiters
      (empties removed), split keeping the delimiter (trailing remainder
      dropped), and split into exactly N parts (pad or merge).
Returns: Lists of segments (str), or generators for the scanning variants.
Used by: Presets, the demo CLI, and callers needing split policies that
         str.split does not provide.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from string_helpers.text.validation import require_char, require_chars

__all__ = [
    "iter_split_on_delimiters",
    "split_on_delimiters",
    "iter_split_keeping_delimiter",
    "split_keeping_delimiter",
    "count_expected_segments",
    "split_into_n_parts",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Split on any delimiter
# ─────────────────────────────────────────────────────────────────────────────


def iter_split_on_delimiters(text: str, delimiters: Iterable[str]) -> Iterator[str]:
    """
    Does: Scan `text` once; any code point in `delimiters` closes the current
          segment and is discarded. Empty segments are never yielded.
    Returns: Generator of non-empty segments in scan order.
    """
    delims = require_chars(delimiters)
    start = 0
    for i, ch in enumerate(text):
        if ch in delims:
            if i > start:
                yield text[start:i]
            start = i + 1
    if start < len(text):
        yield text[start:]


def split_on_delimiters(text: str, delimiters: Iterable[str]) -> list[str]:
    """
    Does: Split on any of several single-character delimiters.
    Returns: Non-empty segments; [] for empty text, [text] for no delimiters.

    >>> split_on_delimiters("big,!a brown,cow!", [",", "!", "a", " "])
    ['big', 'brown', 'cow']
    >>> split_on_delimiters("<html><body><h1>Heading</h1></body></html>", "<>/")
    ['html', 'body', 'h1', 'Heading', 'h1', 'body', 'html']
    """
    return list(iter_split_on_delimiters(text, delimiters))


# ─────────────────────────────────────────────────────────────────────────────
# Split keeping the delimiter
# ─────────────────────────────────────────────────────────────────────────────


def iter_split_keeping_delimiter(text: str, delimiter: str) -> Iterator[str]:
    """
    Does: Yield text up to and including each delimiter occurrence.
          Anything after the last delimiter is not yielded.
    """
    require_char(delimiter)
    start = 0
    for i, ch in enumerate(text):
        if ch == delimiter:
            yield text[start : i + 1]
            start = i + 1


def split_keeping_delimiter(text: str, delimiter: str) -> list[str]:
    """
    Does: Split so that every segment ends with `delimiter`.
    Returns: Segments; [] when `delimiter` does not occur. The trailing
             remainder after the final delimiter is dropped on purpose.

    >>> split_keeping_delimiter("hello,world,here", ",")
    ['hello,', 'world,']
    >>> split_keeping_delimiter("hello,world,here,", ",")
    ['hello,', 'world,', 'here,']
    """
    return list(iter_split_keeping_delimiter(text, delimiter))


# ─────────────────────────────────────────────────────────────────────────────
# Split into exactly N parts
# ─────────────────────────────────────────────────────────────────────────────


def count_expected_segments(text: str, delimiter: str) -> int:
    """Does: Count segments a plain split on `delimiter` would produce (occurrences + 1)."""
    require_char(delimiter)
    return text.count(delimiter) + 1


def split_into_n_parts(text: str, delimiter: str, n: int) -> list[str]:
    """
    Does: Split `text` on `delimiter` into exactly `n` segments:
          - same count as a plain split → plain split (empties kept)
          - fewer → plain split padded with "" up to n
          - more → split at most n-1 times; the last segment keeps the rest,
            further delimiters included
    Returns: List of length n ([] when n == 0).

    >>> split_into_n_parts("This is a string.", " ", 3)
    ['This', 'is', 'a string.']
    >>> split_into_n_parts("This is a string.", " ", 5)
    ['This', 'is', 'a', 'string.', '']
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    expected = count_expected_segments(text, delimiter)

    if expected == n:
        log.debug("split_into_n_parts: exact (%d segments)", n)
        return text.split(delimiter)

    if expected < n:
        log.debug("split_into_n_parts: padding %d → %d", expected, n)
        return text.split(delimiter) + [""] * (n - expected)

    if n == 0:
        return []
    log.debug("split_into_n_parts: merging %d → %d", expected, n)
    return text.split(delimiter, n - 1)

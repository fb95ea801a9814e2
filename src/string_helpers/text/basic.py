# string_helpers/text/basic.py
# ──────────────────────────────────────────────────────────────
# Palindrome check, character counting, reversal
# ──────────────────────────────────────────────────────────────
"""
basic.

Does: Provide code-point level helpers: palindrome detection (ignoring case
      and non-alphanumerics), exact character counting, and reversal.
Returns: is_palindrome(), count_chars(), string_reverse().
Used by: The demo CLI and callers needing quick text checks.
"""

from __future__ import annotations

from .validation import require_char

__all__ = [
    "is_palindrome",
    "count_chars",
    "string_reverse",
]


def string_reverse(text: str) -> str:
    """
    Does: Reverse `text` by code point (not by encoded byte).
    Returns: Reversed string; "" stays "".
    """
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """
    Does: Keep alphanumeric code points only, fold ASCII letters to lower
          case, and compare the result with its reversal. Non-ASCII letters
          keep their case.
    Returns: True for palindromes, including "" and single characters.
    """
    cleaned = "".join(ch.lower() if ch.isascii() else ch for ch in text if ch.isalnum())
    return cleaned == string_reverse(cleaned)


def count_chars(char: str, text: str) -> int:
    """
    Does: Count exact, case-sensitive occurrences of one code point.
    Returns: Non-negative count.
    """
    require_char(char, name="char")
    return text.count(char)

# string_helpers/text/validation.py
"""
validation.

Does: Guard the call boundary where Python has no single-character type.
Returns: require_char() / require_chars(); raise DelimiterError on bad input.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["DelimiterError", "require_char", "require_chars"]


class DelimiterError(ValueError):
    """Raise when a delimiter (or target char) is not exactly one code point."""


def require_char(value: object, *, name: str = "delimiter") -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise DelimiterError(f"{name} must be a single character, got {value!r}")
    return value


def require_chars(values: Iterable[str], *, name: str = "delimiter") -> frozenset[str]:
    """Does: Validate every delimiter and collapse duplicates into a frozenset."""
    if isinstance(values, str):
        return frozenset(values)
    return frozenset(require_char(v, name=name) for v in values)

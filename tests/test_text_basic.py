# tests/test_text_basic.py
"""Tests for palindrome/count/reverse, common affix trimming, and byte decoding."""

from __future__ import annotations

import pytest

from string_helpers.text import affix as A
from string_helpers.text import basic as B
from string_helpers.text.decode import InvalidTextEncoding, decode_text
from string_helpers.text.validation import DelimiterError


# ---------- is_palindrome ----------
@pytest.mark.parametrize(
    "text,expected",
    [
        ("", True),
        ("a", True),
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        ("No 'x' in Nixon", True),
        ("Was it a car or a cat I saw?", True),
        ("0P", False),
        ("!!!", True),                 # nothing left after cleaning
        ("Ésé", False),                # case folded for ASCII only
        ("Éé", False),
        ("ÉxÉ", True),
        ("İ", True),                   # lower() would yield two code points
        ("aİa", True),
        ("İ!", True),
        ("12321", True),
    ],
)
def test_is_palindrome(text, expected):
    assert B.is_palindrome(text) is expected


# ---------- count_chars ----------
@pytest.mark.parametrize(
    "char,text,expected",
    [
        ("a", "banana", 3),
        ("z", "hello", 0),
        ("A", "banana", 0),            # case-sensitive
        ("é", "été", 2),
        ("a", "", 0),
    ],
)
def test_count_chars(char, text, expected):
    assert B.count_chars(char, text) == expected


@pytest.mark.parametrize("bad", ["", "ab"])
def test_count_chars_rejects_non_single_char(bad):
    with pytest.raises(DelimiterError):
        B.count_chars(bad, "banana")


# ---------- string_reverse ----------
@pytest.mark.parametrize(
    "text,expected",
    [("hello", "olleh"), ("", ""), ("añb", "bña"), ("a😀b", "b😀a")],
)
def test_string_reverse(text, expected):
    assert B.string_reverse(text) == expected


@pytest.mark.parametrize("text", ["", "x", "h€llo wörld 🌍", "racecar"])
def test_string_reverse_is_involution(text):
    assert B.string_reverse(B.string_reverse(text)) == text


# ---------- trim_common_prefix / trim_common_suffix ----------
def test_trim_common_prefix():
    assert A.trim_common_prefix(["unhappy", "unhealthy"]) == ["appy", "ealthy"]
    assert A.trim_common_prefix(["abc", "abc"]) == ["", ""]
    assert A.trim_common_prefix(["abc", "xyz"]) == ["abc", "xyz"]


def test_trim_common_suffix():
    assert A.trim_common_suffix(["walking", "talking", "king"]) == ["wal", "tal", ""]
    assert A.trim_common_suffix(["abc", "xyz"]) == ["abc", "xyz"]


@pytest.mark.parametrize("strings", [[], ["only"]])
def test_trim_returns_short_groups_unchanged(strings):
    assert A.trim_common_prefix(strings) == strings
    assert A.trim_common_suffix(strings) == strings
    assert A.trim_common_prefix(strings) is not strings


# ---------- decode_text ----------
def test_decode_text_passes_str_through():
    assert decode_text("café") == "café"


def test_decode_text_decodes_bytes():
    assert decode_text(b"caf\xc3\xa9") == "café"
    assert decode_text(bytearray(b"abc")) == "abc"
    assert decode_text(b"caf\xe9", encoding="latin-1") == "café"


def test_decode_text_rejects_malformed_bytes():
    with pytest.raises(InvalidTextEncoding) as exc:
        decode_text(b"ab\xff")
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
    assert isinstance(exc.value, ValueError)


def test_decode_text_rejects_unknown_encoding():
    with pytest.raises(InvalidTextEncoding):
        decode_text(b"abc", encoding="no-such-codec")

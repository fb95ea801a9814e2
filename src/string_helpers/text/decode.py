# string_helpers/text/decode.py
"""
decode.

Does: Turn raw bytes into text at the input boundary.
Returns: decode_text() -> str; raises InvalidTextEncoding for malformed input.
"""

from __future__ import annotations

import logging

__all__ = ["InvalidTextEncoding", "decode_text"]

log = logging.getLogger(__name__)


class InvalidTextEncoding(ValueError):
    """Raise when raw input cannot be decoded into text."""


def decode_text(raw: bytes | bytearray | str, encoding: str = "utf-8") -> str:
    """
    Does: Pass `str` through unchanged; strictly decode bytes with `encoding`.
    Returns: Decoded text.
    """
    if isinstance(raw, str):
        return raw
    try:
        return bytes(raw).decode(encoding, errors="strict")
    except UnicodeDecodeError as e:
        log.debug("decode failed at byte %d (%s)", e.start, encoding)
        raise InvalidTextEncoding(
            f"Input is not valid {encoding} (byte {e.start}: {e.reason})"
        ) from e
    except LookupError as e:
        raise InvalidTextEncoding(f"Unknown encoding: {encoding!r}") from e

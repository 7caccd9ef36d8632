"""NUL-terminated string helpers: length, search, compare, copy and parse.

Strings may be ``str``, ``bytes`` or ``bytearray``. As with C strings, a NUL
character ends the string: anything after the first NUL is ignored. Searches
return an index into the string, or None when nothing is found.
"""

from __future__ import annotations

import re
from itertools import chain, islice
from typing import Optional, Union

Text = Union[str, bytes, bytearray]
CharLike = Union[int, str]

LONG_MAX = 2**63 - 1

_ATOI = re.compile(r"[ \t\n\v\f\r]*(?P<sign>[+-]?)(?P<digits>[0-9]*)")


def _terminated(s: Text) -> Text:
    """Return ``s`` cut at its first NUL."""
    nul = "\0" if isinstance(s, str) else b"\0"
    end = s.find(nul)
    return s if end < 0 else s[:end]


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c & 0xFF


def _element(text: Text, code: int) -> Text:
    return chr(code) if isinstance(text, str) else bytes([code & 0xFF])


def _codes(text: Text) -> list[int]:
    return [ord(ch) for ch in text] if isinstance(text, str) else list(text)


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def strlen(s: Text) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``; a NUL ``c`` finds the terminator."""
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.find(_element(text, code))
    return None if index < 0 else index


def strrchr(s: Text, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``; a NUL ``c`` finds the terminator."""
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.rfind(_element(text, code))
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch, or 0."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    first = chain(_codes(_terminated(s1)), [0])
    second = chain(_codes(_terminated(s2)), [0])
    for a, b in islice(zip(first, second), n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``, or None.

    An empty ``little`` matches at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[:length].find(needle)
    return None if index < 0 else index


def strlcpy(dst: bytearray, src: bytes, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``. Raises ValueError if ``dst`` is too short
    for what would be written.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    source = bytes(_terminated(src))
    if size == 0:
        return len(source)
    count = min(len(source), size - 1)
    if count + 1 > len(dst):
        raise ValueError(f"destination of {len(dst)} bytes is too short")
    dst[:count + 1] = source[:count] + b"\0"
    return len(source)


def strlcat(dst: bytearray, src: bytes, size: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the total within ``size`` bytes.

    Returns the length the string would have had without truncation; when
    ``size`` does not exceed the current length, returns ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    source = bytes(_terminated(src))
    dst_len = strlen(dst)
    if size <= dst_len:
        return len(source) + size
    count = min(len(source), size - dst_len - 1)
    end = dst_len + count
    if end >= len(dst):
        raise ValueError(f"destination of {len(dst)} bytes is too short")
    dst[dst_len:end + 1] = source[:count] + b"\0"
    return len(source) + dst_len


def strdup(s: Text) -> Text:
    """Return a copy of ``s`` up to its first NUL, of the same type."""
    text = _terminated(s)
    if isinstance(s, bytearray):
        return bytearray(text)
    if isinstance(s, bytes):
        return bytes(text)
    return str(text)


def atoi(text: Union[str, bytes]) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. The result is converted to a 32-bit C ``int``; a value that
    overflows a 64-bit ``long`` saturates first, so positive overflow yields
    -1 and negative overflow yields 0.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    match = _ATOI.match(_terminated(text))
    sign = -1 if match["sign"] == "-" else 1
    value = 0
    for digit in match["digits"]:
        d = ord(digit) - ord("0")
        if value > (LONG_MAX - d) // 10:
            return _to_int32(LONG_MAX if sign > 0 else 0)
        value = value * 10 + d
    return _to_int32(value * sign)
"""Byte-buffer operations: fill, copy, move, search, compare and allocate.

Buffers are ``bytearray`` objects (or any read-only bytes-like object where
nothing is written). A byte count that reaches past the end of a buffer
raises ``ValueError``.
"""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):  # type: ignore[arg-type]
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")  # type: ignore[arg-type]


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (truncated to a byte)."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    if dest is src:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were first
    copied to a temporary buffer.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first differing pair of bytes, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(number: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``number * size`` bytes.

    Raises OverflowError when the product would not fit in a size_t.
    """
    if number < 0 or size < 0:
        raise ValueError("number and size must not be negative")
    if size and number > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(number * size)
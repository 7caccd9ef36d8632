"""Allocating string utilities: substrings, joining, trimming, splitting and mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

from libft.strings import strdup

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty if ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return strdup(s)[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    text = strdup(s)
    chars = strdup(charset)
    if not text or not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: Union[str, int]) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if isinstance(sep, int):
        sep = chr(sep & 0xFF)
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = strdup(s)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def itoa(n: int) -> str:
    """Decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(strdup(s)))


def striteri(
    buf: Union[MutableSequence[str], bytearray],
    f: Callable[[int, object], Optional[object]],
) -> Union[MutableSequence[str], bytearray]:
    """Call ``f(index, item)`` on each item of ``buf`` up to a NUL.

    When ``f`` returns something other than None, the item is replaced in place.
    """
    for index, item in enumerate(buf):
        if item in (0, "\0"):
            break
        replacement = f(index, item)
        if replacement is not None:
            buf[index] = replacement
    return buf
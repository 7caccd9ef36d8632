"""Write characters, strings, lines and numbers to a file descriptor or stream.

``fd`` may be an integer file descriptor, written to with ``os.write``, or a
file-like object with a ``write`` method. Binary streams receive UTF-8
encoded bytes; text streams receive ``str``.
"""

from __future__ import annotations

import io
import os
from typing import IO, Optional, Union

from libft.strings import strdup
from libft.strtools import itoa

Target = Union[int, IO[str], IO[bytes]]


def _write(fd: Target, text: str) -> None:
    if isinstance(fd, bool):
        raise TypeError("a file descriptor must be an int or a stream, not bool")
    if isinstance(fd, int):
        os.write(fd, text.encode("utf-8"))
    elif isinstance(fd, (io.RawIOBase, io.BufferedIOBase)):
        fd.write(text.encode("utf-8"))
    else:
        fd.write(text)


def putchar_fd(c: Union[str, int], fd: Target) -> None:
    """Write the single character ``c`` (a one-character str or a char code)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write(fd, c)
    else:
        _write(fd, chr(c & 0xFF))


def putstr_fd(s: Optional[str], fd: Target) -> None:
    """Write ``s`` up to its first NUL; nothing is written for None."""
    if s is not None:
        _write(fd, strdup(s))


def putendl_fd(s: Optional[str], fd: Target) -> None:
    """Write ``s`` (if not None) followed by a newline."""
    putstr_fd(s, fd)
    _write(fd, "\n")


def putnbr_fd(n: int, fd: Target) -> None:
    """Write the decimal form of the 32-bit signed integer ``n``."""
    _write(fd, itoa(n))
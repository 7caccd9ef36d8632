"""A small printf supporting %c, %s, %d, %i, %u and %x.

Any other ``%`` sequence is written as it stands. Integer arguments are
reduced to 32 bits the way a C ``int`` or ``unsigned int`` would hold them.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, Optional, Sequence

from libft.strings import strdup

LLONG_MIN = -(2**63)

_DIRECTIVE = re.compile(r"%([csdiux])")


def _int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _convert(kind: str, value: Any) -> str:
    if kind == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(value & 0xFF)
    if kind == "s":
        return "(null)" if value is None else strdup(value)
    if kind in "di":
        return str(_int32(value))
    if kind == "u":
        return str(value & 0xFFFFFFFF)
    return format(value & 0xFFFFFFFF, "x")


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each directive replaced by the next argument."""
    remaining: Iterator[Any] = iter(args)

    def replace(match: "re.Match[str]") -> str:
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        return _convert(match.group(1), value)

    return _DIRECTIVE.sub(replace, fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def _argument(text: str) -> Any:
    try:
        return int(text, 0)
    except ValueError:
        return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a format and arguments given on the command line.

    With no arguments, prints ``LLONG_MIN`` with ``%x``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        printf("%x\n", LLONG_MIN)
        return 0
    fmt, *rest = args
    try:
        printf(fmt, *(_argument(a) for a in rest))
    except (TypeError, ValueError) as exc:
        sys.stderr.write(f"printf: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
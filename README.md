# libft

This library collects small low-level helpers. It has character classes,
byte-buffer operations, bounded NUL-terminated string functions, string tools,
output to file descriptors or streams, a singly linked list and a minimal
`printf`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `libft.chars` provides `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper` and `to_lower`. Each one accepts an integer code or a one-character
  string and works on the ASCII range only. The `is_*` functions return a bool.
  The case converters return the same kind of value they were given.
- `libft.memory` provides `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`
  and `calloc`. They work on `bytearray` buffers, or on read-only bytes where
  nothing is written.
  - `memmove(buf, dest, src, n)` moves bytes between offsets within one buffer.
  - `memchr` returns an index or `None`.
  - If a count reaches past the end of a buffer, the function raises `ValueError`.
  - `calloc` raises `OverflowError` when the requested size overflows.
- `libft.strings` provides `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup` and `atoi`.
  - They accept `str`, `bytes` or `bytearray`.
  - Anything after the first NUL is ignored.
  - The search functions return an index or `None`.
  - `strlcpy` and `strlcat` write into a `bytearray`.
  - `atoi` wraps its result to a 32-bit int.
- `libft.strtools` provides `substr`, `strjoin`, `strtrim`, `split`, `itoa`,
  `strmapi` and `striteri`.
  - `split` drops empty words.
  - `itoa` raises `OverflowError` outside the 32-bit range.
  - `striteri` replaces an item in place whenever the callback returns something other than `None`.
- `libft.output` provides `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`.
  The target can be an integer file descriptor or a text or binary stream.
- `libft.linked_list` provides the `Node` and `LinkedList` classes.
  - A list can be built from an iterable.
  - You can iterate over a list and take its `len()`.
  - A list supports `add_front`, `add_back`, `last`, `clear`, `iterate` and `map`.
  - If the mapping function raises during `map`, the contents produced so far are passed to `delete` and the exception propagates.
- `libft.printf` provides `sprintf` and `printf`, which support `%c`, `%s`, `%d`, `%i`,
  `%u` and `%x`.
  - Integers are reduced to 32 bits.
  - `%s` of `None` gives `(null)`.
  - `printf` writes to standard output and returns the number of characters written.

## Example

```python
from libft.strtools import split, itoa
from libft.strings import atoi, strchr
from libft.linked_list import LinkedList
from libft.printf import sprintf

split("  hello  world ", " ")     # ['hello', 'world']
itoa(-42)                         # '-42'
atoi("   -123abc")                # -123
strchr("hello", "l")              # 2

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2)
list(doubled)                     # [2, 4, 6]

sprintf("%s has %d items (0x%x)", "box", 255, 255)  # 'box has 255 items (0xff)'
sprintf("%u", -1)                                   # '4294967295'
```

## Command line

The package installs the `libft-printf` command. Its first argument is the format.
Each remaining argument is read as an integer (decimal, or with a `0x`, `0o` or `0b`
prefix) when it can be, and is passed as a string otherwise:

```
libft-printf "%s=%x" value 255
```

With no arguments, it prints the lowest 64-bit integer with `%x`. The output is
`0` followed by a newline.

## What it does not do

`printf` has no field widths, precision, flags or length modifiers. It has no
`%p` or `%X`, and it has no escape for a literal percent sign. Any other `%`
sequence is written as it stands. The command does not interpret backslash
escapes such as `\n` in the format.
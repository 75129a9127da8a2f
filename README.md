# ftkit

A small collection of low-level helpers with exact, predictable behaviour.
It has no dependencies outside the standard library.

## Modules

- `ftkit.chars`: ASCII character classes and case mapping: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`.
  Each accepts a one-character string or an integer code point; the case
  converters return the same kind they were given.
- `ftkit.memory`: operations on byte buffers: `memset`, `bzero`, `calloc`,
  `memcpy`, `memmove`, `memchr`, `memcmp`. Writers change a mutable buffer
  (such as a `bytearray`) in place and return it. `memmove(buf, dest, src, size)`
  moves bytes between two offsets of one buffer, overlap allowed. A negative
  size raises `ValueError`; a size running past a buffer raises `IndexError`.
- `ftkit.strings`: string building and slicing: `itoa`, `strjoin`, `strlcpy`,
  `strlcat`, `strmapi`, `striteri`, `strtrim`, `substr`. `strlcpy` and
  `strlcat` return a `(text, length)` pair, where the length is what a
  bounded C-style copy would report.
- `ftkit.search`: searching and comparing strings: `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `strstr`. Searches return an index, or `None` when
  nothing is found; a string ends at its first NUL character.
- `ftkit.lists`: a singly linked list, `LinkedList`, made of `Node` links,
  with `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each`,
  `map`, `len()` and iteration.
- `ftkit.lines`: `LineReader` and `read_lines` read a file object or a file
  descriptor one line at a time through a fixed-size buffer (10 by default).
  Lines keep their trailing newline. A descriptor yields `bytes`; a file
  object yields whatever its `read` returns.
- `ftkit.output`: `format_printf` expands the `%c %s %p %d %i %u %x %X %%`
  conversions with 32-bit integer semantics; `printf` writes the result to a
  stream (standard output by default) and returns its length. Also
  `format_hex`, `format_pointer`, and the writers `put_char`, `put_str`,
  `put_endl`, `put_nbr`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.strings import itoa, strtrim, substr
from ftkit.search import strchr
from ftkit.output import format_printf
from ftkit.lines import read_lines
from ftkit.lists import LinkedList

itoa(-42)                         # "-42"
strtrim("  hello  ", " ")         # "hello"
substr("lorem ipsum", 6, 3)       # "ips"
strchr("hello", "l")              # 2

format_printf("%s has %d items (%x)", "box", 255, 255)
# "box has 255 items (ff)"

with open("notes.txt", "rb") as fh:
    for line in read_lines(fh, 10):
        ...                       # bytes, each keeping its trailing newline

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items)                       # [0, 1, 2, 3]
len(items)                        # 4
```

## What it does not do

ftkit is a library only: it installs no command-line program. Formatted
output supports no field widths, precisions or flags, only the conversions
listed above.
"""Formatted output: a small printf and helpers that write characters,
strings and numbers to a text stream.

The conversions follow C semantics for 32-bit integers: ``%d`` and ``%i``
wrap their argument to a signed 32-bit value, ``%u``, ``%x`` and ``%X`` to an
unsigned one. Every writer returns the number of characters written. When
no stream is given, standard output is used.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Union

from .strings import itoa

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("expected an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def _int32(value: Any) -> int:
    n = _as_int(value) & _UINT32_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _uint32(value: Any) -> int:
    return _as_int(value) & _UINT32_MASK


def _char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(_as_int(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a str, got {type(value).__name__}")
    return value


def format_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of the non-negative integer ``n``."""
    value = _as_int(n)
    if value < 0:
        raise ValueError("cannot format a negative number as hexadecimal")
    digits = _HEX_UPPER if upper else _HEX_LOWER
    out = []
    while True:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
        if not value:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Return ``address`` as '0x' followed by lower-case hex, or '(nil)' for null."""
    if address is None:
        return "(nil)"
    value = _as_int(address)
    if value == 0:
        return "(nil)"
    return "0x" + format_hex(value)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": format_pointer,
    "d": lambda value: itoa(_int32(value)),
    "i": lambda value: itoa(_int32(value)),
    "u": lambda value: itoa(_uint32(value)),
    "x": lambda value: format_hex(_uint32(value)),
    "X": lambda value: format_hex(_uint32(value), True),
}


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Supported conversions are %c %s %p %d %i %u %x %X and %%. An unknown
    conversion produces nothing and consumes no argument; a lone '%' at the
    end is kept as is. Extra arguments are ignored; missing ones raise
    ``TypeError``.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a str, got {type(fmt).__name__}")
    remaining: Iterator[Any] = iter(args)
    out = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            out.append("%")
        elif spec == "%":
            out.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            out.append(_CONVERSIONS[spec](value))
    return "".join(out)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _write(text: str, stream: Optional[TextIO]) -> int:
    _target(stream).write(text)
    return len(text)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``format_printf(fmt, *args)`` to ``stream``; return its length."""
    return _write(format_printf(fmt, *args), stream)


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> int:
    """Write one character; an integer is taken as a byte value."""
    return _write(_char(c), stream)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s``, or '(null)' when it is None."""
    return _write(_string(s), stream)


def put_endl(s: str, stream: Optional[TextIO] = None) -> int:
    """Write ``s`` followed by a newline."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return _write(s + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal representation of ``n``."""
    return _write(itoa(_as_int(n)), stream)
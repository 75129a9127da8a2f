"""String building helpers: integer formatting, joining, bounded copy and
concatenation, per-character mapping, trimming and slicing."""

from __future__ import annotations

from typing import Callable, MutableSequence, Tuple, TypeVar

_Seq = TypeVar("_Seq", bound=MutableSequence)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _require_count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with a leading '-' if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return f"{n:d}"


def strjoin(first: str, second: str) -> str:
    """Return a new string made of ``first`` followed by ``second``."""
    return _require_str(first, "first") + _require_str(second, "second")


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination that holds ``dstsize`` slots.

    One slot is reserved for the terminator, so at most ``dstsize - 1``
    characters are copied. Returns the copied text and the length of ``src``,
    which tells the caller whether the copy was truncated.
    """
    _require_str(src, "src")
    _require_count(dstsize, "dstsize")
    copied = src[: dstsize - 1] if dstsize else ""
    return copied, len(src)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``dstsize`` slots.

    If ``dst`` already fills the destination, it is returned unchanged along
    with ``dstsize + len(src)``. Otherwise as much of ``src`` as fits, less
    one slot for the terminator, is appended and the total
    ``len(dst) + len(src)`` is returned.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    _require_count(dstsize, "dstsize")
    if dstsize <= len(dst):
        return dst, dstsize + len(src)
    room = dstsize - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    _require_str(s, "s")
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: _Seq, func: Callable[[int, _Seq], object]) -> _Seq:
    """Call ``func(index, s)`` for each position of the mutable sequence ``s``.

    ``func`` may change ``s[index]`` in place. The sequence is returned.
    """
    if not callable(func):
        raise TypeError("func must be callable")
    for index in range(len(s)):
        func(index, s)
    return s


def strtrim(s: str, charset: str) -> str:
    """Return ``s`` without the leading and trailing characters found in ``charset``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    _require_str(s, "s")
    _require_count(start, "start")
    _require_count(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]
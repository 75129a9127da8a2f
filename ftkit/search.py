"""Character and substring search and bounded comparison of strings.

The searches return an index into the string, or None when nothing is
found. A string ends at its first NUL character, if it has one. A character
may be given as a one-character string or as an integer code; integers are
taken modulo 256, as in byte-oriented search.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]


def _text(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(
        f"expected a one-character string or an integer, got {type(c).__name__}"
    )


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string, at index ``len(s)``.
    """
    text = _text(s)
    char = _char(c)
    if char == "\0":
        return len(text)
    found = text.find(char)
    return None if found == -1 else found


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string, at index ``len(s)``.
    """
    text = _text(s)
    char = _char(c)
    if char == "\0":
        return len(text)
    found = text.rfind(char)
    return None if found == -1 else found


def strncmp(a: str, b: str, size: int) -> int:
    """Compare at most ``size`` characters of ``a`` and ``b``.

    Returns 0 if they match, otherwise the difference of the code points of
    the first pair that differs; the end of a string counts as code point 0.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an int, got {type(size).__name__}")
    if size < 0:
        raise ValueError("size must not be negative")
    left = _text(a)
    right = _text(b)
    for index in range(size):
        x = ord(left[index]) if index < len(left) else 0
        y = ord(right[index]) if index < len(right) else 0
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of the first ``needle`` lying wholly within the
    first ``length`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, got {type(length).__name__}")
    if length < 0:
        raise ValueError("length must not be negative")
    text = _text(haystack)
    wanted = _text(needle)
    if not wanted:
        return 0
    found = text.find(wanted, 0, min(length, len(text)))
    return None if found == -1 else found


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Return the index of the first ``needle`` in ``haystack``, or None.

    An empty needle is found at index 0.
    """
    text = _text(haystack)
    wanted = _text(needle)
    if not wanted:
        return 0
    found = text.find(wanted)
    return None if found == -1 else found
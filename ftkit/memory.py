"""Byte-buffer primitives: fill, copy, move, search and compare.

Functions that write take a mutable buffer, such as a ``bytearray``,
``array`` or writable ``memoryview``. They change it in place and return it.
Fill values are truncated to a byte, so -1 writes 0xFF. A size that is
negative raises ``ValueError``. A size that runs past the end of a buffer
raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


def _check_fits(length: int, offset: int, size: int, what: str) -> None:
    if offset < 0:
        raise IndexError(f"{what} offset must not be negative")
    if offset + size > length:
        raise IndexError(
            f"{what}: {size} bytes at offset {offset} exceed buffer of {length} bytes"
        )


def memset(buf: Buffer, value: int, size: int) -> Buffer:
    """Set the first ``size`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_size(size)
    with memoryview(buf) as raw, raw.cast("B") as view:
        _check_fits(len(view), 0, size, "memset")
        view[:size] = bytes([value & 0xFF]) * size
    return buf


def bzero(buf: Buffer, size: int) -> Buffer:
    """Set the first ``size`` bytes of ``buf`` to zero."""
    return memset(buf, 0, size)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer large enough for ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: Buffer, src: ReadableBuffer, size: int) -> Buffer:
    """Copy the first ``size`` bytes of ``src`` to the start of ``dest``."""
    _check_size(size)
    with memoryview(src) as raw_src, raw_src.cast("B") as source:
        _check_fits(len(source), 0, size, "memcpy source")
        with memoryview(dest) as raw_dest, raw_dest.cast("B") as target:
            _check_fits(len(target), 0, size, "memcpy destination")
            target[:size] = bytes(source[:size])
    return dest


def memmove(buf: Buffer, dest: int, src: int, size: int) -> Buffer:
    """Move ``size`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    _check_size(size)
    with memoryview(buf) as raw, raw.cast("B") as view:
        _check_fits(len(view), src, size, "memmove source")
        _check_fits(len(view), dest, size, "memmove destination")
        view[dest : dest + size] = bytes(view[src : src + size])
    return buf


def memchr(data: ReadableBuffer, value: int, size: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` in the first
    ``size`` bytes of ``data``, or None if there is none."""
    _check_size(size)
    with memoryview(data) as raw, raw.cast("B") as view:
        _check_fits(len(view), 0, size, "memchr")
        found = bytes(view[:size]).find(value & 0xFF)
    return None if found == -1 else found


def memcmp(a: ReadableBuffer, b: ReadableBuffer, size: int) -> int:
    """Compare the first ``size`` bytes of ``a`` and ``b``.

    Returns 0 when they are equal, otherwise the difference of the first
    pair of differing bytes, read as unsigned values.
    """
    _check_size(size)
    with memoryview(a) as raw_a, raw_a.cast("B") as left, memoryview(
        b
    ) as raw_b, raw_b.cast("B") as right:
        _check_fits(len(left), 0, size, "memcmp first")
        _check_fits(len(right), 0, size, "memcmp second")
        for x, y in zip(left[:size], right[:size]):
            if x != y:
                return x - y
    return 0
"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

AnyStr_ = Union[str, bytes]
Source = Union[int, IO[str], IO[bytes]]

DEFAULT_BUFFER_SIZE = 10


class LineReader:
    """Return successive lines, newline included, from a file or descriptor.

    The source is read in chunks of ``buffer_size``; data read past the end
    of a line is kept for the next call. Each call reads at least one chunk.
    A descriptor (int) is read with ``os.read`` and yields bytes; a file
    object yields whatever its ``read`` returns.
    """

    def __init__(self, source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int) and not isinstance(source, bool) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self._source = source
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr_] = None

    def _read_chunk(self) -> AnyStr_:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def _fill(self) -> Optional[AnyStr_]:
        pieces = [] if self._stash is None else [self._stash]
        while True:
            chunk = self._read_chunk()
            if not chunk:
                break
            pieces.append(chunk)
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
            if newline in chunk:
                break
        if not pieces:
            return None
        return pieces[0][:0].join(pieces)

    def next_line(self) -> Optional[AnyStr_]:
        """Return the next line, or None once the source is exhausted."""
        try:
            data = self._fill()
        except OSError:
            self._stash = None
            raise
        if not data:
            self._stash = None
            return None
        newline = b"\n" if isinstance(data, bytes) else "\n"
        end = data.find(newline)
        if end == -1:
            self._stash = None
            return data
        self._stash = data[end + 1 :]
        return data[: end + 1]

    def reset(self) -> None:
        """Discard any data read ahead but not yet returned."""
        self._stash = None

    def __iter__(self) -> "LineReader":
        return self

    def __next__(self) -> AnyStr_:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line


def read_lines(source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr_]:
    """Yield every line of ``source`` in order."""
    yield from LineReader(source, buffer_size)
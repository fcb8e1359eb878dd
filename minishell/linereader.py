"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from functools import partial
from typing import AnyStr, BinaryIO, TextIO, Union

BUFFER_SIZE = 9

Source = Union[int, TextIO, BinaryIO]


class LineReader:
    """Yield lines from a file descriptor or a text or binary stream.

    Data is read ``buffer_size`` units at a time. Every returned line keeps
    its terminating newline, except a last line that has none. Once the
    input is exhausted, ``read_line`` returns None.
    """

    def __init__(self, stream: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(stream, int):
            if stream < 0:
                raise ValueError(f"invalid file descriptor: {stream}")
            self._read: Callable[[int], AnyStr] = partial(os.read, stream)
        else:
            self._read = stream.read
        self.buffer_size = buffer_size
        self._pending: str | bytes | None = None

    def _fill(self) -> str | bytes | None:
        try:
            chunk = self._read(self.buffer_size)
        except OSError:
            self._pending = None
            raise
        return chunk or None

    def read_line(self) -> str | bytes | None:
        """Return the next line, or None when nothing is left."""
        pending = self._pending
        self._pending = None
        parts: list = []
        while True:
            if pending:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index >= 0:
                    parts.append(pending[: index + 1])
                    rest = pending[index + 1:]
                    self._pending = rest or None
                    return parts[0][:0].join(parts)
                parts.append(pending)
            pending = self._fill()
            if pending is None:
                break
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[str | bytes]:
        while (line := self.read_line()) is not None:
            yield line
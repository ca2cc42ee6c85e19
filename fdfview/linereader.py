"""Reading a text stream line by line through a fixed-size read buffer."""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import TextIO

DEFAULT_BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE


class LineReader:
    """Return one line at a time from ``stream``, newline included.

    The stream is read in chunks of ``buffer_size`` characters; text read
    past the current line is kept for the next call.
    """

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> str | None:
        """The next line, ending in a newline unless it is the last; None at end."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        cut = self._pending.find("\n")
        end = len(self._pending) if cut < 0 else cut + 1
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, newlines included."""
    yield from LineReader(stream)
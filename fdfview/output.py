"""Small helpers that write characters, strings and numbers to a stream."""

from __future__ import annotations

import sys
from typing import TextIO

from fdfview.text import format_int


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(char)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    target = _target(stream)
    target.write(text)
    target.write("\n")


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``number``."""
    _target(stream).write(format_int(number))
"""Reader for XPM pixmaps, both as C source text and as string lists."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from fdfview.colornames import parse_color
from fdfview.text import parse_int

TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_KEY_MASK = 0xFFFFFFFF
_DIRECT_KEY_LIMIT = 2


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class Image:
    """A decoded pixmap: row-major 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """The pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_substring(text: str, needle: str, limit: int) -> int | None:
    """Position of ``needle`` in ``text``, or None.

    A needle longer than ``limit`` is never found.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return None
    index = text.find(needle)
    return None if index < 0 else index


def find_unquoted(text: str, needle: str, limit: int) -> int | None:
    """Position of ``needle`` outside double-quoted parts of ``text``, or None.

    A needle longer than ``limit`` is never found.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return None
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return None


def _blank(text: str, start: int, span: int) -> str:
    end = min(start + span, len(text))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*", len(text))) is not None:
        end = find_substring(text[begin + 2 :], "*/", len(text) - begin - 2)
        text = _blank(text, begin, 3 if end is None else end + 4)
    while (begin := find_unquoted(text, "//", len(text))) is not None:
        end = find_substring(text[begin + 2 :], "\n", len(text) - begin - 2)
        text = _blank(text, begin, 2 if end is None else end + 3)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def color_key(text: str, chars_per_pixel: int) -> int:
    """Pack the first ``chars_per_pixel`` characters into a 32-bit key."""
    if chars_per_pixel < 0 or len(text) < chars_per_pixel:
        raise ValueError("text is shorter than the pixel code")
    key = 0
    for char in text[:chars_per_pixel]:
        key = ((key << 8) + ord(char)) & _KEY_MASK
    return key


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    fields = words(line)
    if len(fields) < 4:
        raise XpmError("header needs width, height, colours and characters per pixel")
    values = tuple(parse_int(field) for field in fields[:4])
    if any(value <= 0 for value in values):
        raise XpmError("header values must be positive")
    width, height, colors, cpp = values
    return width, height, colors, cpp


def _read_color(line: str, cpp: int) -> tuple[int, int]:
    if len(line) < cpp:
        raise XpmError("colour line shorter than the pixel code")
    fields = words(line[cpp:])
    try:
        index = fields.index("c")
    except ValueError:
        raise XpmError("colour line has no 'c' entry") from None
    if index + 1 >= len(fields):
        raise XpmError("colour line has no colour after 'c'")
    suffix = fields[index + 2] if index + 2 < len(fields) else None
    return color_key(line, cpp), parse_color(fields[index + 1], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Decode an XPM given as its strings: header, colours, then pixel rows.

    With one or two characters per pixel a later colour definition of a code
    replaces an earlier one; with more, the first definition is kept. Codes
    without a definition give 0, and the colour ``None`` gives a transparent
    pixel.
    """
    source = iter(lines)
    width, height, color_count, cpp = _read_header(_next_line(source, "header"))

    palette: dict[int, int] = {}
    for _ in range(color_count):
        key, color = _read_color(_next_line(source, "colour line"), cpp)
        if cpp <= _DIRECT_KEY_LIMIT:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(source, "pixel row")
        if len(row) < width * cpp:
            raise XpmError("pixel row shorter than the image width")
        for x in range(width):
            color = palette.get(color_key(row[cpp * x :], cpp), 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return Image(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> Image:
    """Decode XPM source text: comments are dropped, quoted strings read."""
    return parse_xpm(quoted_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))
"""Loading height maps from ``.fdf`` files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain
from os import PathLike

from fdfview.linereader import read_lines
from fdfview.text import parse_int, split_words

NO_ACCESS_MESSAGE = "File doesn't exist or you have no rights to read it"
EMPTY_MESSAGE = "File is empty"
_SEPARATOR = " "


class MapError(Exception):
    """Raised when a map file cannot be read or understood."""


@dataclass(frozen=True)
class HeightMap:
    """A grid of integer heights, stored row by row."""

    rows: tuple[tuple[int, ...], ...]

    @property
    def width(self) -> int:
        """Number of columns, fixed by the first row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def z(self, x: int, y: int) -> int:
        """The height at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) outside {self.width}x{self.height}")
        return self.rows[y][x]

    def height_range(self) -> int:
        """Difference between the highest and lowest point; 0 when empty."""
        values = [value for row in self.rows for value in row]
        if not values:
            return 0
        return max(values) - min(values)


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from the lines of a map file.

    Values are separated by single spaces; a line's newline counts as part
    of its last field, so trailing spaces add a column of zeros. The first
    line fixes the width: shorter lines are padded with zeros, longer ones
    are an error. Each field is read as a leading integer, so ``10,0xFF``
    gives 10.
    """
    source = iter(lines)
    first = next(source, None)
    if first is None:
        raise MapError(EMPTY_MESSAGE)
    width = len(split_words(first, _SEPARATOR))
    rows = []
    for number, line in enumerate(chain([first], source), start=1):
        values = [parse_int(word) for word in split_words(line, _SEPARATOR)]
        if len(values) > width:
            raise MapError(
                f"line {number} has {len(values)} values, expected at most {width}"
            )
        values.extend([0] * (width - len(values)))
        rows.append(tuple(values))
    return HeightMap(tuple(rows))


def read_map(path: str | PathLike[str]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, encoding="latin-1") as stream:
            lines = list(read_lines(stream))
    except OSError as error:
        raise MapError(NO_ACCESS_MESSAGE) from error
    return parse_map(lines)
"""String helpers used when reading map files and formatting numbers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"


def parse_int(text: str) -> int:
    """Parse a leading integer the way the map reader does.

    Leading whitespace is skipped, then any run of ``+``/``-`` signs. More
    than one sign yields 0. Digits are read until the first non-digit;
    anything after them is ignored, and no digits at all yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    signs = len(rest) - len(rest.lstrip("+-"))
    sign_run, rest = rest[:signs], rest[signs:]
    if signs > 1:
        return 0
    negative = sign_run == "-"
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return -value if negative else value


def format_int(number: int) -> str:
    """Return the decimal text of ``number``."""
    return f"{int(number)}"


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def word_count(text: str, sep: str) -> int:
    """Count the non-empty runs of ``text`` separated by ``sep``."""
    return len(split_words(text, sep))


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def compare_n(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the character codes at the first mismatch,
    a shorter string counting as ending in NUL, or 0 when they agree.
    """
    pairs = zip_longest(first[:count], second[:count], fillvalue=_NUL)
    for left, right in pairs:
        if left != right:
            return ord(left) - ord(right)
    return 0


def find_within(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` chars."""
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    A start beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start : start + length]


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def bounded_copy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` slots, one kept for NUL.

    Returns the copied text and the full length of ``source``.
    """
    if size < 1:
        return "", len(source)
    return source[: size - 1], len(source)


def bounded_concat(dest: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``dest`` in a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    had; when ``dest`` already fills the buffer, ``dest`` is returned as is
    with ``size + len(source)``.
    """
    if len(dest) >= size:
        return dest, size + len(source)
    room = size - len(dest) - 1
    return dest + source[:room], len(dest) + len(source)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def apply_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Replace each character in place with ``func(index, char)``.

    A ``None`` result leaves that character unchanged.
    """
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
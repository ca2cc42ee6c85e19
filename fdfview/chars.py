"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Predicates return a bool. Case conversions return a value
of the same kind they were given.
"""

from __future__ import annotations

_UPPER_TO_LOWER = ord("a") - ord("A")


def _code(char: str | int) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError("expected a one-character string or an integer code")
    return char


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(char: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return _is_upper(code) or _is_lower(code)


def is_digit(char: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(char) < 127


def _convert(char: str | int, code: int) -> str | int:
    return chr(code) if isinstance(char, str) else code


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII capital letter; anything else is returned as is."""
    code = _code(char)
    if _is_upper(code):
        return _convert(char, code + _UPPER_TO_LOWER)
    return char


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII small letter; anything else is returned as is."""
    code = _code(char)
    if _is_lower(code):
        return _convert(char, code - _UPPER_TO_LOWER)
    return char
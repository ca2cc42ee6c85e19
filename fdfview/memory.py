"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(count: int, *buffers: Sequence[int]) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError("count exceeds buffer length")


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (low 8 bits)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, count)


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def copy(dest: bytearray, source: Sequence[int], count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``source`` into ``dest``."""
    _check_count(count, dest, source)
    dest[:count] = bytes(source[:count])
    return dest


def move(
    buffer: bytearray, dest_offset: int, source_offset: int, count: int
) -> bytearray:
    """Copy ``count`` bytes within ``buffer``; the regions may overlap."""
    if dest_offset < 0 or source_offset < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError("count must not be negative")
    if max(dest_offset, source_offset) + count > len(buffer):
        raise ValueError("region exceeds buffer length")
    buffer[dest_offset : dest_offset + count] = bytes(
        buffer[source_offset : source_offset + count]
    )
    return buffer


def find_byte(buffer: Sequence[int], value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``count``."""
    _check_count(count, buffer)
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(buffer[:count]) if byte == target),
        None,
    )


def compare(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Difference of the first differing bytes within ``count``, else 0."""
    _check_count(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0
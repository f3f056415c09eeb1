"""Byte-buffer helpers: fill, allocate, search, compare and copy."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "bzero",
    "memset",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
]


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")


def _check_span(length: int, offset: int, count: int, what: str) -> None:
    if offset < 0 or offset + count > length:
        raise IndexError(
            f"{what} range [{offset}, {offset + count}) exceeds buffer of length {length}"
        )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first *count* bytes of *buffer* to ``value & 0xFF``; return *buffer*."""
    _check_count(count)
    _check_span(len(buffer), 0, count, "fill")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first *count* bytes of *buffer*."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Sequence[int], value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value & 0xFF`` among the first
    *count* bytes of *data*, or None if there is none."""
    _check_count(count)
    target = value & 0xFF
    for index, byte in enumerate(data[:count]):
        if byte == target:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Compare the first *count* bytes; return the difference of the first
    differing pair, or 0 if they match."""
    _check_count(count)
    _check_span(len(first), 0, count, "first operand")
    _check_span(len(second), 0, count, "second operand")
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Sequence[int], count: int) -> bytearray:
    """Copy *count* bytes from *src* to the start of *dest*; return *dest*."""
    _check_count(count)
    _check_span(len(dest), 0, count, "destination")
    _check_span(len(src), 0, count, "source")
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Copy *count* bytes within *buffer* from *src_offset* to *dest_offset*,
    correctly even when the ranges overlap; return *buffer*."""
    _check_count(count)
    _check_span(len(buffer), src_offset, count, "source")
    _check_span(len(buffer), dest_offset, count, "destination")
    buffer[dest_offset:dest_offset + count] = bytes(buffer[src_offset:src_offset + count])
    return buffer
"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa"]

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _wrap_int32(value: int) -> int:
    """Reduce *value* to the 32-bit two's-complement range."""
    value %= _INT_RANGE
    return value - _INT_RANGE if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text with no digits yields 0. The result
    wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return _wrap_int32(sign * value)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return f"{number:d}"
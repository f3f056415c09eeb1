"""A small printf-style formatter supporting %c %s %d %i %u %p %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

__all__ = ["to_base", "cformat", "cprintf"]

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_UINT32_MASK = (1 << 32) - 1
_INT32_MAX = (1 << 31) - 1
_POINTER_MASK = (1 << 64) - 1


def to_base(number: int, digits: str) -> str:
    """Return the representation of a non-negative *number* using *digits*.

    The base is the length of *digits*, which must be at least two.
    """
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    base = len(digits)
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value > _INT32_MAX else value


def _fmt_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _fmt_string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _fmt_int(value: Any) -> str:
    number = _to_int32(_as_int(value, "d"))
    if number < 0:
        return "-" + to_base(-number, _DECIMAL)
    return to_base(number, _DECIMAL)


def _fmt_unsigned(value: Any) -> str:
    return to_base(_as_int(value, "u") & _UINT32_MASK, _DECIMAL)


def _fmt_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p")
    return "0x" + to_base(address & _POINTER_MASK, _HEX_LOWER)


def _fmt_hex_lower(value: Any) -> str:
    return to_base(_as_int(value, "x") & _UINT32_MASK, _HEX_LOWER)


def _fmt_hex_upper(value: Any) -> str:
    return to_base(_as_int(value, "X") & _UINT32_MASK, _HEX_UPPER)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _fmt_char,
    "s": _fmt_string,
    "d": _fmt_int,
    "i": _fmt_int,
    "u": _fmt_unsigned,
    "p": _fmt_pointer,
    "x": _fmt_hex_lower,
    "X": _fmt_hex_upper,
}


def _pieces(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    arguments = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            # A lone trailing '%' ends the output.
            return
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # '%%' and unknown specifiers both print the specifier itself.
            yield spec
            continue
        try:
            value = next(arguments)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield convert(value)


def cformat(template: str | None, *args: Any) -> str:
    """Return *template* with its conversions filled in from *args*.

    A None template yields an empty string; a trailing lone ``%`` is dropped
    and an unknown conversion prints its letter.
    """
    if template is None:
        return ""
    return "".join(_pieces(template, args))


def cprintf(template: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Format like :func:`cformat`, write to *stream* (standard output by
    default) and return the number of characters written."""
    text = cformat(template, *args)
    if text:
        (sys.stdout if stream is None else stream).write(text)
    return len(text)
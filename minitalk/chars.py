"""Classification and case conversion of single character codes (ASCII only)."""

from __future__ import annotations

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
]

_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _is_lower(code: int) -> bool:
    return _LOWER_A <= code <= _LOWER_Z


def _is_upper(code: int) -> bool:
    return _UPPER_A <= code <= _UPPER_Z


def isalpha(code: int) -> bool:
    """Return True if *code* is an ASCII letter."""
    return _is_lower(code) or _is_upper(code)


def isdigit(code: int) -> bool:
    """Return True if *code* is an ASCII decimal digit."""
    return _DIGIT_0 <= code <= _DIGIT_9


def isalnum(code: int) -> bool:
    """Return True if *code* is an ASCII letter or digit."""
    return isdigit(code) or isalpha(code)


def isascii(code: int) -> bool:
    """Return True if *code* lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def isprint(code: int) -> bool:
    """Return True if *code* is a printable ASCII character, space included."""
    return 32 <= code < 127


def toupper(code: int) -> int:
    """Return the upper-case code for an ASCII lower-case letter, else *code*."""
    return code - _CASE_OFFSET if _is_lower(code) else code


def tolower(code: int) -> int:
    """Return the lower-case code for an ASCII upper-case letter, else *code*."""
    return code + _CASE_OFFSET if _is_upper(code) else code
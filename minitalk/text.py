"""String helpers: length, search, comparison, bounded copy, slicing and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import NamedTuple

__all__ = [
    "BoundedCopy",
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strncpy",
    "strlcat",
    "strjoin",
    "strmapi",
    "striteri",
    "substr",
    "strtrim",
    "split",
]

_TERMINATOR = "\0"


class BoundedCopy(NamedTuple):
    """Result of a size-bounded copy or concatenation.

    ``text`` is what the destination holds afterwards; ``length`` is the
    length the full, untruncated result would have had.
    """

    text: str
    length: int


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str | None) -> int:
    """Return the length of *text*; None counts as empty."""
    return len(text) if text else 0


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first *char* in *text*, or None.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    """
    _check_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _TERMINATOR else None


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last *char* in *text*, or None.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    """
    _check_char(char)
    if char == _TERMINATOR:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most *count* characters.

    Returns the code-point difference of the first differing pair, a shorter
    string comparing as if followed by a terminator, or 0 if they match.
    """
    _check_non_negative("count", count)
    for index in range(count):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of *needle* lying wholly within the first *length*
    characters of *haystack*, or None. An empty needle is found at 0."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> BoundedCopy:
    """Copy *src* into a destination of *size* characters, terminator included.

    With *size* 0 nothing is written and the copied text is empty.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return BoundedCopy(copied, len(src))


def strncpy(src: str, size: int) -> BoundedCopy:
    """Bounded copy with the same contract as :func:`strlcpy`."""
    return strlcpy(src, size)


def strlcat(dst: str, src: str, size: int) -> BoundedCopy:
    """Append *src* to *dst* within a buffer of *size* characters.

    The reported length is ``len(src)`` when *size* is 0,
    ``size + len(src)`` when the buffer is already full, and
    ``len(dst) + len(src)`` otherwise.
    """
    _check_non_negative("size", size)
    if size == 0:
        return BoundedCopy(dst, len(src))
    if size <= len(dst):
        return BoundedCopy(dst, size + len(src))
    room = size - 1 - len(dst)
    return BoundedCopy(dst + src[:room], len(dst) + len(src))


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of *chars* in place by ``func(index, char)``."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from *start*.

    A start past the end yields an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]


def strtrim(text: str, charset: str) -> str:
    """Strip characters found in *charset* from both ends of *text*."""
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split *text* on *separator*, dropping empty pieces."""
    _check_char(separator)
    return [word for word in text.split(separator) if word]
"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = ["putchar", "putstr", "putendl", "putnbr"]


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(char: str, stream: TextIO | None = None) -> None:
    """Write the single character *char* to *stream* (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def putstr(text: str | None, stream: TextIO | None = None) -> None:
    """Write *text* to *stream*; None writes nothing."""
    if text:
        _target(stream).write(text)


def putendl(text: str, stream: TextIO | None = None) -> None:
    """Write *text* followed by a newline to *stream*."""
    _target(stream).write(text + "\n")


def putnbr(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of *number* to *stream*."""
    _target(stream).write(f"{number:d}")
"""Bit-per-signal wire protocol shared by the client and the server.

Each byte travels most significant bit first: a 1 bit is sent as SIGUSR1 and
a 0 bit as SIGUSR2. A zero byte ends the message. The server answers every
bit with SIGUSR2, except the last bit of the terminating zero byte, which it
answers with SIGUSR1.
"""

from __future__ import annotations

import signal
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = [
    "BITS_PER_BYTE",
    "TERMINATOR",
    "BIT_SIGNALS",
    "ACK_BIT",
    "ACK_MESSAGE",
    "ByteDecoder",
    "bit_to_signal",
    "signal_to_bit",
    "encode_byte",
    "encode_message",
]

BITS_PER_BYTE = 8
TERMINATOR = 0
BIT_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})
ACK_BIT = signal.SIGUSR2
ACK_MESSAGE = signal.SIGUSR1


def bit_to_signal(bit: int) -> signal.Signals:
    """Return the signal that carries *bit*."""
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def signal_to_bit(signum: int) -> int:
    """Return the bit carried by the signal *signum*."""
    if signum == signal.SIGUSR1:
        return 1
    if signum == signal.SIGUSR2:
        return 0
    raise ValueError(f"signal {signum} does not carry a bit")


def encode_byte(value: int) -> list[int]:
    """Return the eight bits of *value*, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"a byte must lie in 0..255, got {value}")
    return [(value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1)]


def _as_bytes(message: str | bytes) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8", "surrogateescape")
    return bytes(message)


def _bits(data: Iterable[int]) -> Iterator[int]:
    for value in data:
        yield from encode_byte(value)
    yield from encode_byte(TERMINATOR)


def encode_message(message: str | bytes) -> Iterator[int]:
    """Return the bits of *message* followed by those of the terminating zero byte.

    A message may not itself contain a zero byte.
    """
    data = _as_bytes(message)
    if TERMINATOR in data:
        raise ValueError("a message cannot contain a zero byte")
    return _bits(data)


@dataclass
class ByteDecoder:
    """Collects bits, most significant first, into bytes."""

    value: int = 0
    count: int = 0

    def feed(self, bit: int) -> int | None:
        """Add *bit*; return the completed byte after every eighth bit, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self.value = ((self.value << 1) | bit) & 0xFF
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        byte = self.value
        self.reset()
        return byte

    def reset(self) -> None:
        """Discard any partly received byte."""
        self.value = 0
        self.count = 0
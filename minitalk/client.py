"""Client that sends a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from minitalk.cformat import cprintf
from minitalk.numbers import atoi
from minitalk.output import putstr
from minitalk.protocol import (
    ACK_BIT,
    ACK_MESSAGE,
    BIT_SIGNALS,
    BITS_PER_BYTE,
    bit_to_signal,
    encode_message,
)

__all__ = ["RESPONSE_TIMEOUT", "ServerNotResponding", "AckCounter", "send_message", "main"]

RESPONSE_TIMEOUT = 0.5


class ServerNotResponding(Exception):
    """The server did not acknowledge a bit in time."""

    def __init__(self, pid: int) -> None:
        super().__init__(f"no response from server {pid}")
        self.pid = pid


@dataclass
class AckCounter:
    """Counts the server's acknowledgements and reports the delivered bytes."""

    stream: TextIO | None = None
    bits: int = 0
    acknowledged: bool = False

    @property
    def bytes_received(self) -> int:
        """Number of whole bytes the server has confirmed."""
        return self.bits // BITS_PER_BYTE

    def on_signal(self, signum: int) -> None:
        """Record the acknowledgement *signum* from the server."""
        self.acknowledged = True
        if signum == ACK_BIT:
            self.bits += 1
        elif signum == ACK_MESSAGE:
            cprintf("Number of bytes received -> %d\n", self.bytes_received, stream=self.stream)


def _ignore(signum: int, frame: object) -> None:
    pass


def send_message(pid: int, message: str | bytes, stream: TextIO | None = None) -> int:
    """Send *message* to the server *pid*, waiting for each bit to be acknowledged.

    Returns the number of bytes the server confirmed; raises
    :class:`ServerNotResponding` if an acknowledgement does not arrive in time.
    """
    counter = AckCounter(stream)
    bits = encode_message(message)
    handlers = {signum: signal.signal(signum, _ignore) for signum in BIT_SIGNALS}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, BIT_SIGNALS)
    try:
        for bit in bits:
            counter.acknowledged = False
            os.kill(pid, bit_to_signal(bit))
            info = signal.sigtimedwait(BIT_SIGNALS, RESPONSE_TIMEOUT)
            if info is None:
                raise ServerNotResponding(pid)
            counter.on_signal(info.si_signo)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)
        for signum, handler in handlers.items():
            signal.signal(signum, handler)
    return counter.bytes_received


def main(argv: Sequence[str] | None = None) -> int:
    """Send the message given as the second argument to the server whose
    process id is the first."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        cprintf("Pass 2 args, not %d\n", len(args))
        return 1
    pid = atoi(args[0])
    try:
        if pid < 0:
            raise ProcessLookupError(pid)
        os.kill(pid, 0)
    except OSError:
        cprintf("check your PID\n")
        return 1
    if getattr(signal, "sigtimedwait", None) is None:
        putstr("Error sigaction\n")
        return 1
    try:
        send_message(pid, args[1])
    except ServerNotResponding:
        putstr("No response from server.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
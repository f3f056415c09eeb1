"""Server that receives messages sent one bit per signal."""

from __future__ import annotations

import argparse
import codecs
import os
import signal
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from minitalk.cformat import cprintf
from minitalk.output import putstr
from minitalk.protocol import (
    ACK_BIT,
    ACK_MESSAGE,
    BIT_SIGNALS,
    TERMINATOR,
    ByteDecoder,
    signal_to_bit,
)

__all__ = ["Server", "main"]


class Server:
    """Decodes bits from one sender at a time and prints each message.

    In buffered mode a message is printed once its terminator arrives;
    otherwise every byte is printed as soon as it is complete. Each bit is
    acknowledged to the sender through *notify*, which defaults to ``os.kill``.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        buffered: bool = True,
        notify: Callable[[int, int], None] | None = None,
    ) -> None:
        self._stream = stream
        self.buffered = buffered
        self._notify = notify if notify is not None else os.kill
        self._decoder = ByteDecoder()
        self._sender: int | None = None
        self._message = bytearray()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def sender(self) -> int | None:
        """The process whose message is being received, or None when idle."""
        return self._sender

    @property
    def _out(self) -> TextIO:
        return sys.stdout if self._stream is None else self._stream

    def handle(self, signum: int, sender: int) -> None:
        """Process one bit-carrying signal *signum* sent by process *sender*.

        Signals from other processes are ignored while a message is in progress.
        """
        bit = signal_to_bit(signum)
        if self._sender is not None and sender != self._sender:
            return
        if self._sender is None:
            self._sender = sender
        byte = self._decoder.feed(bit)
        if byte == TERMINATOR:
            self._notify(sender, ACK_MESSAGE)
            self._sender = None
            self._finish_message()
            return
        if byte is not None:
            self._receive_byte(byte)
        self._notify(sender, ACK_BIT)

    def _receive_byte(self, byte: int) -> None:
        if self.buffered:
            self._message.append(byte)
            return
        text = self._text.decode(bytes([byte]))
        if text:
            self._out.write(text)
            self._out.flush()

    def _finish_message(self) -> None:
        if self.buffered:
            text = bytes(self._message).decode("utf-8", "replace")
            self._message.clear()
        else:
            text = self._text.decode(b"", final=True)
            self._text.reset()
        putstr(text, self._out)
        self._out.flush()

    def serve_forever(self) -> None:
        """Wait for bit-carrying signals and handle them until interrupted."""
        if getattr(signal, "sigwaitinfo", None) is None:
            raise OSError("waiting for signals with sender details is not supported")
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, BIT_SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(BIT_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the server's process id and receive messages until interrupted."""
    parser = argparse.ArgumentParser(prog="server", description=Server.__doc__)
    parser.add_argument(
        "--stream",
        action="store_true",
        help="print each byte as it arrives instead of whole messages",
    )
    args = parser.parse_args(argv)
    cprintf("Server PID is: %d\n", os.getpid())
    sys.stdout.flush()
    server = Server(buffered=not args.stream)
    try:
        server.serve_forever()
    except OSError:
        putstr("Error sigaction\n")
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
# minitalk

A pair of commands that pass a text message from one process to another
using nothing but two POSIX signals. Each bit of the message is sent as
`SIGUSR1` (a one) or `SIGUSR2` (a zero), most significant bit first, and a
zero byte ends the message. The server answers every bit with `SIGUSR2` so
the client knows when to send the next one, and answers the last bit of the
terminating zero byte with `SIGUSR1`.

Requires Python 3.10 or later on a system where Python's `signal` module
provides `sigwaitinfo` and `sigtimedwait`, such as Linux. Where they are
missing (macOS, for one) both commands print `Error sigaction` and exit
with status 1.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
until interrupted:

```
minitalk-server
Server PID is: 4242
```

From another terminal, send it a message:

```
minitalk-client 4242 "Hello there"
```

By default the server prints a message once all of it has arrived. With
`--stream` it prints each character as soon as its bytes are complete:

```
minitalk-server --stream
```

Bytes that are not valid UTF-8 are shown as the replacement character.

When the server confirms the end of the message, the client reports how
many bytes the server acknowledged:

```
Number of bytes received -> 11
```

The client needs exactly two arguments, the server's PID and the message;
otherwise it prints `Pass 2 args, not N` and exits with status 1. If the PID
is negative or no such process can be signalled it prints `check your PID`
and exits with status 1. If the server does not acknowledge a bit within
half a second, the client prints `No response from server.` and stops.

The server serves one client at a time: signals from any other process are
ignored until the current message is finished.

Both commands can also be started as `python -m minitalk.server` and
`python -m minitalk.client`.

## Library use

The wire format is available on its own in `minitalk.protocol`:

```python
from minitalk.protocol import encode_message, ByteDecoder

decoder = ByteDecoder()
for bit in encode_message("hi"):
    byte = decoder.feed(bit)
    if byte is not None:
        print(byte)
```

`encode_message` yields the bits of each byte most significant first,
followed by the eight zero bits of the terminating byte; it raises
`ValueError` if the message itself contains a zero byte. `bit_to_signal`
and `signal_to_bit` convert between bits and the two signals.

`minitalk.server.Server` does the receiving side without touching real
signals if you give it a `notify` callable in place of `os.kill`:

```python
import io, signal
from minitalk.protocol import bit_to_signal, encode_message
from minitalk.server import Server

out = io.StringIO()
server = Server(out, notify=lambda pid, signum: None)
for bit in encode_message("hi"):
    server.handle(bit_to_signal(bit), sender=1234)
print(out.getvalue())  # hi
```

`minitalk.client.send_message(pid, message)` sends a message to a running
server and returns the number of bytes it confirmed, raising
`ServerNotResponding` on a timeout.

The package also carries the small helpers the commands are built from:
character classes (`minitalk.chars`), byte buffers (`minitalk.memory`),
string handling (`minitalk.text`), number conversion (`minitalk.numbers`),
a singly linked list (`minitalk.linkedlist`), stream output
(`minitalk.output`) and a minimal printf-style formatter supporting
`%c %s %d %i %u %p %x %X %%` (`minitalk.cformat`).

## Running the tests

```
pip install ".[test]"
pytest
```
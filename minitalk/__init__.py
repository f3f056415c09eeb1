"""Send text between processes one bit at a time using SIGUSR1 and SIGUSR2,
with the small string, memory, number, list and formatting helpers it uses."""

__version__ = "0.1.0"
__all__ = [
    "cformat",
    "chars",
    "client",
    "linkedlist",
    "memory",
    "numbers",
    "output",
    "protocol",
    "server",
    "text",
]
"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "client",
    "linkedlist",
    "memory",
    "output",
    "printf",
    "protocol",
    "server",
    "strings",
]
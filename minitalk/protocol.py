"""The bit-per-signal wire protocol.

Each byte travels as eight signals, least significant bit first: SIGUSR1
carries a 0 bit and SIGUSR2 a 1 bit. A message ends with a NUL byte. The
receiver answers every bit with SIGUSR1; a receiver that confirms receipt
also sends SIGUSR2 once the terminating NUL has arrived.
"""

from __future__ import annotations

from enum import IntEnum
from signal import SIGUSR1, SIGUSR2
from typing import Iterator, List, Optional, Union

BITS_PER_BYTE = 8
TERMINATOR = 0


class Bit(IntEnum):
    """A single transmitted bit and the signal that carries it."""

    ZERO = 0
    ONE = 1

    @property
    def signal(self) -> int:
        """The signal number that carries this bit."""
        return SIGUSR2 if self is Bit.ONE else SIGUSR1

    @classmethod
    def from_signal(cls, signum: int) -> "Bit":
        """Return the bit carried by ``signum``."""
        if signum == SIGUSR1:
            return cls.ZERO
        if signum == SIGUSR2:
            return cls.ONE
        raise ValueError(f"signal {signum} does not carry a bit")


def encode_byte(value: int) -> Iterator[Bit]:
    """Yield the eight bits of ``value``, least significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    for position in range(BITS_PER_BYTE):
        yield Bit((value >> position) & 1)


def encode_message(message: Union[str, bytes]) -> Iterator[Bit]:
    """Yield the bits of ``message`` followed by those of the NUL terminator.

    A ``str`` is sent as UTF-8. Anything after an embedded NUL is not sent.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for value in data:
        yield from encode_byte(value)
    yield from encode_byte(TERMINATOR)


class ByteDecoder:
    """Collects bits, least significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: Union[Bit, int]) -> Optional[int]:
        """Add one bit; return the byte once eight bits have arrived."""
        if Bit(bit) is Bit.ONE:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        return value


class MessageAssembler:
    """Collects bytes into messages that end with a NUL byte."""

    def __init__(self) -> None:
        self._buffer: List[int] = []

    def feed(self, value: int) -> Optional[bytes]:
        """Add one byte; return the finished message when ``value`` is NUL."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        if value != TERMINATOR:
            self._buffer.append(value)
            return None
        message = bytes(self._buffer)
        self._buffer.clear()
        return message
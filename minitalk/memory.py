"""Byte-buffer operations on bytes-like objects.

Writable buffers are ``bytearray`` (or any mutable buffer supporting slice
assignment). Counts larger than the buffers involved raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional

_SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buf in buffers:
        if count > len(buf):
            raise ValueError(f"count {count} exceeds buffer length {len(buf)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` truncated to a byte."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes of ``buffer``."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError(f"{count} * {size} overflows the maximum allocation size")
    return bytearray(total)


def memchr(data: bytes, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``count`` bytes, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(destination: bytearray, source: bytes, count: int) -> bytearray:
    """Copy ``count`` bytes of ``source`` to the start of ``destination``."""
    _check_count(count, destination, source)
    if destination is not source:
        destination[:count] = bytes(source[:count])
    return destination


def memmove(buffer: bytearray, destination: int, source: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``source`` to ``destination``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if destination < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if max(destination, source) + count > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    if count and destination != source:
        buffer[destination:destination + count] = bytes(buffer[source:source + count])
    return buffer
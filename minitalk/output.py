"""Write characters, strings and numbers to a text stream.

A stream of ``None`` stands for a closed descriptor: nothing is written.
"""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(char: str, stream: Optional[TextIO]) -> None:
    """Write one character to ``stream``."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if stream is None:
        return
    stream.write(char)


def put_str(text: Optional[str], stream: Optional[TextIO]) -> None:
    """Write ``text`` to ``stream``; a missing text writes nothing."""
    if stream is None or text is None:
        return
    stream.write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO]) -> None:
    """Write ``text`` followed by a newline; a missing text writes nothing."""
    if stream is None or text is None:
        return
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(number: int, stream: Optional[TextIO]) -> None:
    """Write ``number`` in decimal, with a leading minus sign when negative."""
    if stream is None:
        return
    if number < 0:
        put_char("-", stream)
        number = -number
    put_str(str(number), stream)
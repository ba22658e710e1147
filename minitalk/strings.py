"""String helpers with C-string semantics.

Strings are ordinary ``str`` objects. Where a NUL character matters (length,
searching for the terminator, a mapping function returning NUL) it is treated
as the end of the string. Positions are returned as indices, with ``None``
meaning "not found".
"""

from __future__ import annotations

from itertools import takewhile, zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple

from minitalk.chars import isdigit

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace and one optional sign are skipped; parsing stops at the
    first non-digit. Text without digits yields 0. Values outside the 32-bit
    range wrap around.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    _check_char(separator)
    return [piece for piece in text.split(separator) if piece]


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    index = text.find(_NUL)
    return len(text) if index < 0 else index


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char``; NUL finds the terminator."""
    _check_char(char)
    if char == _NUL:
        return strlen(text)
    index = text.find(char, 0, strlen(text))
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char``; NUL finds the terminator."""
    _check_char(char)
    if char == _NUL:
        return strlen(text)
    index = text.rfind(char, 0, strlen(text))
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text`` up to its first NUL."""
    return text[:strlen(text)]


def striteri(
    buffer: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` for every character of ``buffer``.

    A non-None return value replaces the character in place.
    """
    for index, char in enumerate(list(buffer)):
        replacement = func(index, char)
        if replacement is not None:
            buffer[index] = replacement
    return buffer


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character.

    A NUL returned by ``func`` ends the result.
    """
    mapped = "".join(func(index, char) for index, char in enumerate(strdup(text)))
    return strdup(mapped)


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of ``first`` and ``second``."""
    if first is None or second is None:
        raise TypeError("strjoin needs two strings")
    return strdup(first) + strdup(second)


def strlcpy(source: str, size: int) -> Tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``source``.
    """
    _check_non_negative("size", size)
    source = strdup(source)
    copied = source[:size - 1] if size > 0 else ""
    return copied, len(source)


def strlcat(destination: str, source: str, size: int) -> Tuple[str, int]:
    """Append ``source`` to ``destination`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had;
    when ``size`` does not exceed the destination length, the destination is
    left unchanged and ``size + len(source)`` is returned.
    """
    _check_non_negative("size", size)
    destination = strdup(destination)
    source = strdup(source)
    if size <= len(destination):
        return destination, size + len(source)
    appended, _ = strlcpy(source, size - len(destination))
    return destination + appended, len(destination) + len(source)


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the code difference of the first unequal pair, or 0. A string that
    ends early compares as NUL.
    """
    _check_non_negative("count", count)
    pairs = zip_longest(
        strdup(first)[:count], strdup(second)[:count], fillvalue=_NUL
    )
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    _check_non_negative("limit", limit)
    haystack = strdup(haystack)
    needle = strdup(needle)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(limit, len(haystack)))
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("strtrim needs two strings")
    return strdup(text).strip(strdup(charset))


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    text = strdup(text)
    if start > len(text):
        return ""
    return text[start:start + length]
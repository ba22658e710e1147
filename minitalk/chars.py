"""ASCII character classification and case conversion.

Each function accepts either an integer character code or a one-character
string. The case converters return a value of the same kind as their input.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(code: CharLike) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"expected an int or a one-character str, got {type(code).__name__}")
    return code


def _same_kind(original: CharLike, value: int) -> CharLike:
    return chr(value) if isinstance(original, str) else value


def isalpha(code: CharLike) -> bool:
    """Return True for an ASCII letter."""
    value = _code(code)
    return ord("a") <= value <= ord("z") or ord("A") <= value <= ord("Z")


def isdigit(code: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    value = _code(code)
    return ord("0") <= value <= ord("9")


def isalnum(code: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: CharLike) -> bool:
    """Return True for a code in the range 0..127."""
    return 0 <= _code(code) <= 127


def isprint(code: CharLike) -> bool:
    """Return True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(code) <= 126


def tolower(code: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else unchanged."""
    value = _code(code)
    if ord("A") <= value <= ord("Z"):
        value += 32
    return _same_kind(code, value)


def toupper(code: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else unchanged."""
    value = _code(code)
    if ord("a") <= value <= ord("z"):
        value -= 32
    return _same_kind(code, value)
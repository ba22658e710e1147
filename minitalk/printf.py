"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %%.

An unknown conversion is reproduced literally with its percent sign; a
format ending in a lone percent sign is an error.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator

from minitalk.strings import strdup

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32 = 2**32
_UINTPTR = 2**64
_MISSING = object()


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def itoa_base(number: int, digits: str) -> str:
    """Write a non-negative ``number`` using ``digits`` as the base's symbols."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if not number:
            break
    return "".join(reversed(out))


def _int_arg(spec: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, got {type(value).__name__}")
    return value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_int_arg("c", value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str, got {type(value).__name__}")
    return strdup(value)


def _format_int(value: Any) -> str:
    number = (_int_arg("d", value) + 2**31) % _UINT32 - 2**31
    if number < 0:
        return "-" + itoa_base(-number, _DECIMAL)
    return itoa_base(number, _DECIMAL)


def _format_ptr(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _int_arg("p", value) % _UINTPTR
    if address == 0:
        return "(nil)"
    return "0x" + itoa_base(address, _HEX_LOWER)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return "%" + spec
    value = next(values, _MISSING)
    if value is _MISSING:
        raise FormatError(f"missing argument for %{spec}")
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec in "di":
        return _format_int(value)
    if spec == "u":
        return itoa_base(_int_arg(spec, value) % _UINT32, _DECIMAL)
    if spec == "x":
        return itoa_base(_int_arg(spec, value) % _UINT32, _HEX_LOWER)
    if spec == "X":
        return itoa_base(_int_arg(spec, value) % _UINT32, _HEX_UPPER)
    return _format_ptr(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    if fmt is None:
        raise TypeError("format must be a str")
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)
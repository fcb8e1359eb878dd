"""Formatted output with a small set of printf conversions.

Supported conversions: %c, %s, %d, %i, %u, %x, %X, %p and %%. Any other
character after "%" produces no output and consumes no argument.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _uint64(value: int) -> int:
    return value & 0xFFFFFFFFFFFFFFFF


def _as_int(value: object, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _convert_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _convert_string(value: object) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _convert_pointer(value: object) -> str:
    if value is None:
        return _NULL_POINTER
    address = _uint64(_as_int(value, "p"))
    if address == 0:
        return _NULL_POINTER
    return f"0x{address:x}"


def _convert(conversion: str, args: Iterator[object]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "csdiuxXp" or not conversion:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _convert_char(value)
    if conversion == "s":
        return _convert_string(value)
    if conversion in "di":
        return str(_int32(_as_int(value, conversion)))
    if conversion == "u":
        return str(_uint32(_as_int(value, conversion)))
    if conversion == "x":
        return f"{_uint32(_as_int(value, conversion)):x}"
    if conversion == "X":
        return f"{_uint32(_as_int(value, conversion)):X}"
    return _convert_pointer(value)


def format_printf(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    if fmt is None:
        raise TypeError("format string missing")
    values = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            parts.append(_convert(next(chars, ""), values))
        else:
            parts.append(ch)
    return "".join(parts)


def fprintf(stream: TextIO, fmt: str, *args: object) -> int:
    """Write the formatted text to ``stream``; return the number of characters."""
    text = format_printf(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output; return the number of characters."""
    return fprintf(sys.stdout, fmt, *args)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    (stream if stream is not None else sys.stdout).write(f"{text}\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write ``n`` in decimal as a 32-bit signed integer."""
    (stream if stream is not None else sys.stdout).write(str(_int32(_as_int(n, "d"))))
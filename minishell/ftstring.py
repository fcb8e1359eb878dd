"""String helpers with the exact edge-case behaviour the shell relies on."""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_ATOI_SPACE = frozenset(" \t\r\n\v\f")
_LONG_MAX = 2**63 - 1
_ULLONG_MOD = 2**64


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A magnitude beyond the signed 64-bit range gives -1 for a
    positive number and 0 for a negative one. The result wraps to 32 bits.
    """
    rest = text.lstrip("".join(_ATOI_SPACE))
    sign = 1
    if rest[:1] == "-":
        sign = -1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = (value * 10 + ord(ch) - 48) % _ULLONG_MOD
        if value > _LONG_MAX:
            return 0 if sign == -1 else -1
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single character, dropping empty pieces."""
    _single_char(sep)
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = islice(zip_longest(s1, s2, fillvalue="\0"), n)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> str | None:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    Returns the rest of ``big`` from the match, ``big`` itself when ``little``
    is empty, or None.
    """
    if not little:
        return big
    if length <= 0:
        return None
    index = big.find(little, 0, length)
    return big[index:] if index >= 0 else None


def strchr(text: str, c: str) -> str | None:
    """Return ``text`` from the first ``c`` on, "" for NUL, or None."""
    _single_char(c)
    if c == "\0":
        return ""
    index = text.find(c)
    return text[index:] if index >= 0 else None


def strrchr(text: str, c: str) -> str | None:
    """Return ``text`` from the last ``c`` on, "" for NUL, or None."""
    _single_char(c)
    if c == "\0":
        return ""
    index = text.rfind(c)
    return text[index:] if index >= 0 else None


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))
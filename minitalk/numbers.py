"""Conversion between text and 32-bit signed integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def parse_int(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace is skipped, then a single optional ``+`` or ``-``,
    then as many digits as follow. Parsing stops at the first other
    character; if no digits are read the result is 0. The result wraps
    like a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def format_int(n: int) -> str:
    """Return the decimal text of ``n``, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    return str(n)
"""Minimal formatted output and plain writers to a text stream.

The format language knows these conversions, each introduced by ``%``:

``c``  one character, given as a one-character string or an integer code
``s``  a string; ``None`` prints as ``(null)``
``p``  an address in hexadecimal with a ``0x`` prefix; ``None`` or 0
       prints as ``(nil)``
``d``, ``i``  a signed 32-bit decimal integer
``u``  an unsigned 32-bit decimal integer
``x``, ``X``  an unsigned 32-bit integer in lower or upper case hexadecimal
``%``  a literal percent sign

Any other character after ``%`` produces no output and uses no argument.
A ``%`` at the very end of the format is written as is.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from minitalk.numbers import format_int

Char = Union[str, int]

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_TEXT = "(null)"
_NIL_TEXT = "(nil)"


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, not {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char_text(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    return chr(_require_int(c, "c") & 0xFF)


def _pointer_text(ptr: Any) -> str:
    if ptr is None:
        return _NIL_TEXT
    if isinstance(ptr, int) and not isinstance(ptr, bool):
        address = ptr & _UINT64_MASK
    else:
        address = id(ptr) & _UINT64_MASK
    if address == 0:
        return _NIL_TEXT
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        return _char_text(take())
    if spec == "s":
        value = take()
        return _NULL_TEXT if value is None else str(value)
    if spec == "p":
        return _pointer_text(take())
    if spec in ("d", "i"):
        return format_int(_to_int32(_require_int(take(), spec)))
    if spec == "u":
        return format_int(_require_int(take(), spec) & _UINT32_MASK)
    if spec == "x":
        return f"{_require_int(take(), spec) & _UINT32_MASK:x}"
    if spec == "X":
        return f"{_require_int(take(), spec) & _UINT32_MASK:X}"
    if spec == "%":
        return "%"
    return ""


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``fmt`` produces with ``args``.

    Raises ``TypeError`` when an argument is missing or of the wrong kind.
    Surplus arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, not {type(fmt).__name__}")
    remaining = iter(args)
    pieces = []
    pos = 0
    length = len(fmt)
    while pos < length:
        ch = fmt[pos]
        if ch == "%" and pos + 1 < length:
            pieces.append(_convert(fmt[pos + 1], remaining))
            pos += 2
        else:
            pieces.append(ch)
            pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``render(fmt, *args)`` to ``stream`` and return its length."""
    text = render(fmt, *args)
    _stream(stream).write(text)
    return len(text)


def put_char(c: Char, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(stream).write(_char_text(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    _stream(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    _stream(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(format_int(n))
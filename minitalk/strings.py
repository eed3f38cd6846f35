"""String searching, comparison, bounded copying and slicing helpers.

Strings are ordinary Python ``str`` values. Where a character argument is
expected it may be a one-character string or an integer code. An integer
code is reduced modulo 256. The NUL character ``"\\0"`` is matched at the
end of the string, as if every string carried a terminator.
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Optional, Union

Char = Union[str, int]

_NUL = "\0"


class BoundedResult(NamedTuple):
    """Outcome of a size-limited copy or concatenation.

    ``text`` is what fits in a buffer of the given size. ``needed`` is the
    length the full result would have had, so ``needed >= size`` signals
    truncation.
    """

    text: str
    needed: int


def _char(c: Char) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return chr(c % 256)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def find_char(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the end of the string when ``s`` holds none.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == _NUL:
        return len(s)
    return None


def rfind_char(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL always finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def bounded_find(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within ``big[:length]``.

    An empty ``little`` is found at index 0. Returns ``None`` otherwise.
    """
    _non_negative("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return index if index >= 0 else None


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first position
    where they differ, treating the end of a string as code 0. Returns 0
    when the first ``n`` characters match.
    """
    _non_negative("n", n)
    limit = min(n, max(len(s1), len(s2)) + 1)
    for i in range(limit):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def bounded_copy(src: str, size: int) -> BoundedResult:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator."""
    _non_negative("size", size)
    text = src[: size - 1] if size > 0 else ""
    return BoundedResult(text, len(src))


def bounded_concat(dest: str, src: str, size: int) -> BoundedResult:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    When ``size`` does not exceed ``len(dest)`` nothing is appended and the
    needed length reported is ``size + len(src)``.
    """
    _non_negative("size", size)
    if size <= len(dest):
        return BoundedResult(dest, size + len(src))
    room = size - len(dest) - 1
    return BoundedResult(dest + src[:room], len(dest) + len(src))


def substring(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def trim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: Char) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))
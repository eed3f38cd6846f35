"""Wire format for sending bytes one bit at a time as user signals.

Each byte goes most significant bit first. A 0 bit is ``SIGUSR1`` and a 1
bit is ``SIGUSR2``. A message ends with a NUL byte. The receiver
acknowledges every bit with ``SIGUSR2``.
"""

from __future__ import annotations

import enum
import signal
from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8


class Bit(enum.IntEnum):
    """One transmitted bit and the signal that carries it."""

    ZERO = 0
    ONE = 1

    @property
    def signal(self) -> int:
        """The signal number that carries this bit."""
        return int(signal.SIGUSR2 if self is Bit.ONE else signal.SIGUSR1)

    @classmethod
    def from_signal(cls, signum: int) -> "Bit":
        """Return the bit carried by ``signum``."""
        if signum == signal.SIGUSR1:
            return cls.ZERO
        if signum == signal.SIGUSR2:
            return cls.ONE
        raise ValueError(f"signal {signum} carries no bit")


def encode_byte(value: int) -> Iterator[Bit]:
    """Yield the eight bits of ``value``, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, not {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    for shift in range(BITS_PER_BYTE - 1, -1, -1):
        yield Bit((value >> shift) & 1)


def encode_message(message: Union[bytes, str]) -> Iterator[Bit]:
    """Yield the bits of ``message`` followed by a terminating NUL byte.

    A ``str`` is encoded as UTF-8.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data:
        yield from encode_byte(byte)
    yield from encode_byte(0)


class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """How many bits of the current byte have been received."""
        return self._count

    def feed(self, bit: Union[Bit, int]) -> Optional[int]:
        """Add one bit; return the byte it completes, else ``None``."""
        bit = Bit(bit)
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte
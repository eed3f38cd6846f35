"""Server that rebuilds bytes from incoming signals and writes them out."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, Optional, Sequence

from minitalk.printf import printf
from minitalk.protocol import Bit, BitDecoder


def _acknowledge(pid: int) -> None:
    os.kill(pid, signal.SIGUSR2)


class Server:
    """Receives bits as signals, writes each completed byte and acknowledges.

    ``output`` is a binary stream (standard output by default) and
    ``acknowledge`` is called with the sender's pid after every bit.
    """

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        acknowledge: Optional[Callable[[int], None]] = None,
    ) -> None:
        self._output = output
        self._acknowledge = acknowledge or _acknowledge
        self._decoder = BitDecoder()

    @property
    def output(self) -> BinaryIO:
        return sys.stdout.buffer if self._output is None else self._output

    def handle(self, signum: int, sender_pid: int) -> None:
        """Take one signal from ``sender_pid``."""
        byte = self._decoder.feed(Bit.from_signal(signum))
        if byte is not None:
            out = self.output
            out.write(bytes([byte]))
            out.flush()
        self._acknowledge(sender_pid)

    def serve(self) -> None:
        """Announce the pid and handle user signals until interrupted."""
        printf("Server PID = %d\n", os.getpid())
        sys.stdout.flush()
        signals = [int(signal.SIGUSR1), int(signal.SIGUSR2)]
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        while True:
            info = signal.sigwaitinfo(signals)
            self.handle(info.si_signo, info.si_pid)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted."""
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 0
    return 0
"""Client that sends a message to a server process bit by bit."""

from __future__ import annotations

import os
import signal
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from minitalk.chars import is_digit
from minitalk.numbers import parse_int
from minitalk.printf import printf
from minitalk.protocol import encode_message

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
DONE_TEXT = "Everything has been successfully received!\n"


class ArgumentError(ValueError):
    """The command line does not describe a valid transmission."""


def validate_args(argv: Sequence[str]) -> Tuple[int, str]:
    """Check ``[pid, message]`` and return the pid as an int and the message."""
    if len(argv) != 2:
        raise ArgumentError("Invalid number of arguments")
    pid_text, message = argv
    if not all(is_digit(ch) for ch in pid_text):
        raise ArgumentError("Invalid PID")
    if not message:
        raise ArgumentError("Invalid message (empty)")
    return parse_int(pid_text), message


@contextmanager
def _blocked(signals: List[int]) -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def send_message(pid: int, message: Union[bytes, str]) -> None:
    """Send ``message`` and its terminator to ``pid``, one acknowledged bit at a time."""
    ack = int(signal.SIGUSR2)
    with _blocked([ack]):
        for bit in encode_message(message):
            os.kill(pid, bit.signal)
            signal.sigwait([ack])


def _pid_alive(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except OSError:
        return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        pid, message = validate_args(args)
    except ArgumentError as exc:
        printf("ERROR\n%s\n", str(exc))
        return EXIT_FAILURE
    if pid <= 0 or not _pid_alive(pid):
        printf("ERROR\nBad PID\n")
        return EXIT_FAILURE
    send_message(pid, os.fsencode(message))
    printf(DONE_TEXT)
    return EXIT_SUCCESS
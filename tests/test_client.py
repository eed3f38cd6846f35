import signal
from unittest import mock

import pytest

from minitalk.client import ArgumentError, main, send_message, validate_args
from minitalk.protocol import encode_message


def test_validate_ok():
    assert validate_args(["123", "hi"]) == (123, "hi")


@pytest.mark.parametrize(
    "argv, text",
    [
        ([], "Invalid number of arguments"),
        (["1"], "Invalid number of arguments"),
        (["1", "a", "b"], "Invalid number of arguments"),
        (["12a", "hi"], "Invalid PID"),
        (["-5", "hi"], "Invalid PID"),
        (["42", ""], "Invalid message (empty)"),
    ],
)
def test_validate_errors(argv, text):
    with pytest.raises(ArgumentError) as info:
        validate_args(argv)
    assert str(info.value) == text


@mock.patch("signal.pthread_sigmask", return_value=set())
@mock.patch("signal.sigwait", return_value=signal.SIGUSR2)
@mock.patch("os.kill")
def test_send_message_signals(kill, sigwait, sigmask):
    send_message(77, b"ok")
    expected = [mock.call(77, bit.signal) for bit in encode_message(b"ok")]
    assert kill.call_args_list == expected
    assert sigwait.call_count == len(expected)


@mock.patch("signal.pthread_sigmask", return_value=set())
@mock.patch("signal.sigwait", return_value=signal.SIGUSR2)
@mock.patch("os.kill")
def test_main_success(kill, sigwait, sigmask, capsys):
    assert main(["321", "hi"]) == 0
    assert kill.call_args_list[0] == mock.call(321, 0)
    assert len(kill.call_args_list) == 1 + 3 * 8
    assert "successfully" in capsys.readouterr().out


def test_main_invalid_pid(capsys):
    assert main(["12a", "x"]) == 1
    assert capsys.readouterr().out == "ERROR\nInvalid PID\n"


def test_main_wrong_count(capsys):
    assert main(["1"]) == 1
    assert capsys.readouterr().out == "ERROR\nInvalid number of arguments\n"


def test_main_zero_pid(capsys):
    assert main(["0", "x"]) == 1
    assert capsys.readouterr().out == "ERROR\nBad PID\n"


@mock.patch("os.kill", side_effect=ProcessLookupError)
def test_main_dead_pid(kill, capsys):
    assert main(["99", "x"]) == 1
    assert capsys.readouterr().out == "ERROR\nBad PID\n"
    assert kill.call_args_list == [mock.call(99, 0)]
import pytest

from minitalk.numbers import format_int, parse_int


def test_source_example_stops_at_non_digit():
    assert parse_int(" a954 9") == 0


def test_int_max_round_trip():
    assert parse_int("2147483647") == 2147483647
    assert format_int(2147483647) == "2147483647"


def test_int_min_round_trip():
    assert parse_int("-2147483648") == -2147483648
    assert format_int(-2147483648) == "-2147483648"


def test_itoa_source_example():
    assert format_int(-897) == "-897"


def test_zero():
    assert format_int(0) == "0"
    assert parse_int("0") == 0
    assert parse_int("") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 7, -897, 4242, 2147483647, -2147483648])
def test_round_trip(n):
    assert parse_int(format_int(n)) == n


@pytest.mark.parametrize("ws", [" ", "\t", "\n", "\v", "\f", "\r", " \t\n"])
def test_leading_whitespace_skipped(ws):
    assert parse_int(ws + "123") == 123


def test_plus_sign_accepted():
    assert parse_int("+77") == 77


def test_only_one_sign():
    assert parse_int("--5") == 0
    assert parse_int("+-5") == 0


def test_trailing_text_ignored():
    assert parse_int("12abc") == 12
    assert parse_int("  -34 56") == -34


def test_overflow_wraps_like_int32():
    assert parse_int("2147483648") == -2147483648


def test_format_rejects_non_int():
    with pytest.raises(TypeError):
        format_int(1.5)
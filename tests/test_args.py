import pytest

from philo.args import (
    ArgumentError,
    Settings,
    is_digits,
    parse_args,
    parse_long,
    valid_args,
)


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("12a", False), ("", True), ("-1", False), ("+1", False), (" 1", False)],
)
def test_is_digits(text, expected):
    assert is_digits(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -42", -42),
        ("+7abc", 7),
        ("\t\n15", 15),
        ("abc", 0),
        ("", 0),
        ("800", 800),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


def test_valid_args_accepts_four_and_five():
    assert valid_args(["5", "800", "200", "200"]) is True
    assert valid_args(["5", "800", "200", "200", "7"]) is True


@pytest.mark.parametrize(
    "argv",
    [
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
        [],
        ["0", "800", "200", "200"],
        ["-5", "800", "200", "200"],
        ["5", "800", "2x0", "200"],
        ["5", "800", "200", ""],
        ["5", "800", "200", "2147483648"],
    ],
)
def test_valid_args_rejects(argv):
    assert valid_args(argv) is False


def test_valid_args_accepts_int_max():
    assert valid_args(["1", "2147483647", "1", "1"]) is True


def test_parse_args_defaults_eat_times():
    assert parse_args(["5", "800", "200", "200"]) == Settings(5, 800, 200, 200, -1)


def test_parse_args_with_eat_times():
    settings = parse_args(["4", "410", "200", "100", "7"])
    assert settings.num_philo == 4
    assert settings.t_die == 410
    assert settings.eat_times == 7


def test_parse_args_invalid_raises():
    with pytest.raises(ArgumentError, match="Please enter 4 or 5 positive integers"):
        parse_args(["4", "410"])
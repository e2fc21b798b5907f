"""Command-line argument validation and parsing for the dining simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = {chr(code) for code in range(9, 14)} | {" "}
_DIGITS = "0123456789"

USAGE_MESSAGE = "Please enter 4 or 5 positive integers"


class ArgumentError(ValueError):
    """Raised when the simulation arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    num_philo: int
    t_die: int
    t_eat: int
    t_sleep: int
    eat_times: int = -1


def is_digits(text: str) -> bool:
    """Return True when every character of ``text`` is an ASCII digit."""
    return all(char in _DIGITS for char in text)


def parse_long(text: str) -> int:
    """Parse a leading integer the way ``atol`` does, ignoring trailing junk."""
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if char not in _DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def valid_args(argv: Sequence[str]) -> bool:
    """Check that ``argv`` holds 4 or 5 positive integers that fit an int."""
    if not 4 <= len(argv) <= 5:
        return False
    for arg in argv:
        if not is_digits(arg):
            return False
        value = parse_long(arg)
        if value <= 0 or value < INT_MIN or value > INT_MAX:
            return False
    return True


def parse_args(argv: Sequence[str]) -> Settings:
    """Validate ``argv`` and build the simulation settings from it."""
    if not valid_args(argv):
        raise ArgumentError(USAGE_MESSAGE)
    values = [parse_long(arg) for arg in argv]
    return Settings(*values)
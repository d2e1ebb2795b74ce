"""Command-line argument validation and simulation settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

PROG_NAME = "philo:"
MAX_PHILOS = 250
INT_MAX = 2_147_483_647

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one dining-philosophers simulation (times in ms)."""

    nb_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: int = -1


def usage() -> str:
    """Return the usage message."""
    return (
        f"{PROG_NAME} usage: ./philo <number_of_philosophers> "
        "<time_to_die> <time_to_Eat> <time_to_sleep> "
        "[number_of_times_each_philosopher_must_eat]"
    )


def contains_only_digits(text: str) -> bool:
    """Return True if every character of ``text`` is an ASCII digit."""
    return all(char in _DIGITS for char in text)


def integer_atoi(text: str) -> int:
    """Parse the leading digits of ``text``; return -1 above INT_MAX."""
    value = 0
    for char in text:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
    return -1 if value > INT_MAX else value


def _digit_error(text: str) -> InputError:
    return InputError(
        f"{PROG_NAME} ivalid input: {text}: "
        f"not a valid unsigned integer between 0 and {INT_MAX}."
    )


def validate_arguments(args: Sequence[str]) -> None:
    """Check each argument's value, raising InputError on the first bad one."""
    for position, text in enumerate(args):
        if not contains_only_digits(text):
            raise _digit_error(text)
        value = integer_atoi(text)
        if position == 0 and (value <= 0 or value > MAX_PHILOS):
            raise InputError(
                f"{PROG_NAME} invalid input: "
                f"there must be between 1 and {MAX_PHILOS} philosophers."
            )
        if position != 0 and value == -1:
            raise _digit_error(text)


def parse_settings(args: Sequence[str]) -> Settings:
    """Validate the arguments (program name excluded) and build Settings."""
    if not 4 <= len(args) <= 5:
        raise InputError(usage())
    validate_arguments(args)
    values = [integer_atoi(text) for text in args]
    must_eat = values[4] if len(values) == 5 else -1
    return Settings(values[0], values[1], values[2], values[3], must_eat)
"""First programs: a greeting, squaring, summing arguments and a counting loop."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class UsageError(ValueError):
    """Raised when a command is given the wrong number of arguments."""


def greeting_lines() -> list[str]:
    """Return the lines of the welcome message."""
    number = 42
    letter = "A"
    return [
        "Hello, world! Welcome to the world of programming.",
        f"Here's a number for you: {number}",
        f"Here's a letter: {letter}",
    ]


def parse_int(text: str) -> int:
    """Read a leading integer from text, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def square(number: int) -> int:
    """Return the square of a number."""
    return number * number


def sum_arguments(argv: Sequence[str]) -> tuple[int, int, int]:
    """Parse two numbers from a command line and return them with their sum.

    ``argv`` includes the program name, as in ``sys.argv``.
    """
    if len(argv) != 3:
        program = argv[0] if argv else "sum"
        raise UsageError(f"Usage: {program} <num1> <num2>")
    first = parse_int(argv[1])
    second = parse_int(argv[2])
    return first, second, first + second


def running_sums(number: int) -> Iterator[tuple[int, int]]:
    """Yield each addend from 1 to number together with the sum so far."""
    total = 0
    for value in range(1, number + 1):
        total += value
        yield value, total


def loop_lines(number: int) -> list[str]:
    """Return the report of summing the numbers from 1 to number."""
    lines = [f"You entered: {number}"]
    if number <= 0:
        lines.append("Please enter a positive number next time!")
        return lines
    total = 0
    for value, total in running_sums(number):
        lines.append(f"Adding {value}, current sum = {total}")
    lines.append(f"The sum of numbers from 1 to {number} is: {total}")
    return lines
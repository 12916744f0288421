"""Small string library."""

from __future__ import annotations


def str_length(text: str) -> int:
    """Return the length of a string."""
    return len(text)


def str_concat(first: str, second: str) -> str:
    """Return the two strings joined together."""
    return first + second


def str_compare(first: str, second: str) -> int:
    """Compare two strings: negative if first sorts before second, 0 if equal, else positive."""
    return (first > second) - (first < second)


def demo_lines(first: str = "Hello, ", second: str = "world!") -> list[str]:
    """Return the lines showing each operation on two strings."""
    lines = [
        f'Length of "{first}": {str_length(first)}',
        f"Concatenated string: {str_concat(first, second)}",
    ]
    comparison = str_compare(first, second)
    if comparison < 0:
        lines.append(f'"{first}" is lexicographically less than "{second}"')
    elif comparison == 0:
        lines.append(f'"{first}" is equal to "{second}"')
    else:
        lines.append(f'"{first}" is lexicographically greater than "{second}"')
    return lines
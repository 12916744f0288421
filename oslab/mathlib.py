"""Small arithmetic library."""

from __future__ import annotations


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return a - b."""
    return a - b


def multiply(a: int, b: int) -> int:
    """Return a * b."""
    return a * b


def divide(a: float, b: float) -> float:
    """Return a / b, or 0.0 when b is zero."""
    if b == 0:
        return 0.0
    return a / b


def demo_lines() -> list[str]:
    """Return the lines showing each operation on sample values."""
    a, b = 10, 5
    c, d = 12.5, 2.5
    return [
        f"Addition: {a} + {b} = {add(a, b)}",
        f"Subtraction: {a} - {b} = {subtract(a, b)}",
        f"Multiplication: {a} * {b} = {multiply(a, b)}",
        f"Division: {c:.1f} / {d:.1f} = {divide(c, d):.2f}",
    ]
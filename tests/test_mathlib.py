import pytest

from oslab.mathlib import add, demo_lines, divide, multiply, subtract


@pytest.mark.parametrize("a, b", [(10, 5), (-3, 8), (0, 0), (123, -456)])
def test_add_subtract_inverse(a, b):
    assert subtract(add(a, b), b) == a
    assert subtract(a, b) == add(a, -b)


@pytest.mark.parametrize("a, b", [(10, 5), (-3, 8), (7, 0)])
def test_multiply_commutes(a, b):
    assert multiply(a, b) == multiply(b, a)
    assert multiply(a, 1) == a


@pytest.mark.parametrize("a, b", [(12.5, 2.5), (1.0, 3.0), (-9.0, 4.0)])
def test_divide_inverts_multiplication(a, b):
    assert divide(a, b) * b == pytest.approx(a)


def test_divide_by_zero_gives_zero():
    assert divide(12.5, 0) == 0.0


def test_demo_lines():
    lines = demo_lines()
    assert lines[0] == f"Addition: 10 + 5 = {add(10, 5)}"
    assert lines[1] == f"Subtraction: 10 - 5 = {subtract(10, 5)}"
    assert lines[2] == f"Multiplication: 10 * 5 = {multiply(10, 5)}"
    assert lines[3] == "Division: 12.5 / 2.5 = 5.00"
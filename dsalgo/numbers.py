"""Small number-theory helpers."""

from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm (non-negative)."""
    a, b = abs(a), abs(b)
    while a:
        a, b = b % a, a
    return b


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_palindrome_number(number: int) -> bool:
    """True when the decimal digits read the same both ways."""
    sign = -1 if number < 0 else 1
    return number == sign * int(str(abs(number))[::-1])


def digit_sum(number: int) -> int:
    """Sum of the decimal digits of a positive number; 0 otherwise."""
    total = 0
    while number > 0:
        number, digit = divmod(number, 10)
        total += digit
    return total


def is_magic(number: int) -> bool:
    """True when repeated digit sums reach 1."""
    while number > 9:
        number = digit_sum(number)
    return number == 1


def factorial(n: int) -> int:
    """n! computed by a loop; 1 for n <= 0."""
    result = 1
    while n > 0:
        result *= n
        n -= 1
    return result


def is_perfect_cube(number: int) -> bool:
    """True when a non-negative integer is the cube of an integer."""
    if number < 0:
        return False
    root = round(number ** (1 / 3))
    return any((root + delta) ** 3 == number for delta in (-1, 0, 1))
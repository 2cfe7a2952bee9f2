"""Small recursive classics: factorials, powers, digits, palindromes and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

DIGIT_NAMES = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    _check_non_negative("n", n)
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def power_of_two(n: int) -> int:
    """Return 2 raised to the non-negative integer n."""
    _check_non_negative("n", n)
    return 1 << n


def power(a: int, b: int) -> int:
    """Return a raised to b by repeated squaring.

    A negative exponent yields a itself.
    """
    if b < 0:
        return a
    result = 1
    base = a
    while b:
        if b % 2:
            result *= base
        base *= base
        b //= 2
    return result


def say_digits(number: int) -> list[str]:
    """Return the English name of each decimal digit of number, most significant first."""
    _check_non_negative("number", number)
    return [DIGIT_NAMES[int(digit)] for digit in str(number)]


def array_sum(values: Iterable[Any]) -> Any:
    """Return the sum of values, starting from 0."""
    total = 0
    for value in values:
        total += value
    return total


def reverse_digits(n: int) -> str:
    """Return the decimal digits of n in reverse order, keeping any leading zeros."""
    _check_non_negative("n", n)
    digits = []
    while n >= 10:
        n, remainder = divmod(n, 10)
        digits.append(str(remainder))
    digits.append(str(n))
    return "".join(digits)


def is_palindrome(text: Sequence[Any]) -> bool:
    """Return whether text reads the same from both ends."""
    i, j = 0, len(text) - 1
    while i < j:
        if text[i] != text[j]:
            return False
        i += 1
        j -= 1
    return True


def reverse_sequence(values: Iterable[Any]) -> Any:
    """Return values reversed by swapping from both ends inward.

    A string gives a string; anything else gives a list.
    """
    items = list(values)
    i, j = 0, len(items) - 1
    while i < j:
        items[i], items[j] = items[j], items[i]
        i += 1
        j -= 1
    if isinstance(values, str):
        return "".join(items)
    return items


def count_down(n: int) -> Iterator[int]:
    """Return an iterator over n, n-1, ..., 1."""
    _check_non_negative("n", n)
    return iter(range(n, 0, -1))
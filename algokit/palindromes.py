"""Palindromic numbers."""

from __future__ import annotations

from collections.abc import Iterator


def is_palindrome_number(number: int) -> bool:
    """True if the decimal digits of ``number`` read the same reversed.

    Negative numbers are never palindromes; zero is one.
    """
    reversed_value = 0
    remaining = number
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == number


def palindrome_report(low: int, high: int) -> Iterator[tuple[int, bool]]:
    """Yield ``(number, is_palindrome)`` for every number from low to high inclusive."""
    for number in range(low, high + 1):
        yield number, is_palindrome_number(number)
"""Small problems from the classic recursion repertoire."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import pairwise
from typing import NamedTuple


class Move(NamedTuple):
    """One move in the tower of Hanoi: a disc carried between two pegs."""

    disc: int
    source: str
    destination: str


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    return list(range(n, 0, -1))


def count_up(start: int, stop: int) -> list[int]:
    """Return the numbers from ``start`` up to ``stop``, both included."""
    return list(range(start, stop + 1))


def power(x: int, n: int) -> int:
    """Return ``x`` raised to the non-negative power ``n``."""
    if n < 0:
        raise ValueError("exponent must not be negative")
    if n == 0:
        return 1
    if x == 0:
        return 0
    result = 1
    for _ in range(n):
        result *= x
    return result


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial() is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` terms of the Fibonacci series, starting 0, 1."""
    if n < 0:
        raise ValueError("number of terms must not be negative")
    terms: list[int] = []
    a, b = 0, 1
    for _ in range(n):
        terms.append(a)
        a, b = b, a + b
    return terms


def find_occurrences(text: str, char: str) -> tuple[int, int]:
    """Return the first and last index of ``char`` in ``text``.

    A single occurrence is both first and last; an absent character gives
    ``(-1, -1)``.
    """
    if len(char) != 1:
        raise ValueError("char must be a single character")
    return text.find(char), text.rfind(char)


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def sum_to(n: int) -> int:
    """Return ``1 + 2 + ... + n`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n * (n + 1) // 2


def _hanoi(n: int, source: str, helper: str, destination: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, destination)
        return
    yield from _hanoi(n - 1, source, destination, helper)
    yield Move(n, source, destination)
    yield from _hanoi(n - 1, helper, source, destination)


def tower_of_hanoi(n: int, source: str, helper: str, destination: str) -> list[Move]:
    """Return the moves that carry ``n`` discs from ``source`` to ``destination``."""
    if n < 0:
        raise ValueError("number of discs must not be negative")
    if n == 0:
        return []
    return list(_hanoi(n, source, helper, destination))


def is_strictly_increasing(values: Iterable[int]) -> bool:
    """Return True if every item is smaller than the one after it."""
    return all(a < b for a, b in pairwise(values))


def move_x_to_end(text: str) -> str:
    """Return ``text`` with every ``'x'`` moved to the end, other characters in order."""
    rest = "".join(ch for ch in text if ch != "x")
    return rest + "x" * (len(text) - len(rest))
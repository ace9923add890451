"""Array problems solved with hash maps and sets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def count_distinct_in_windows(values: Sequence[int], k: int) -> list[int]:
    """Return the number of distinct items in every window of ``k`` consecutive items."""
    if not 0 < k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}")
    counts = Counter(values[:k])
    result = [len(counts)]
    for leaving, entering in zip(values, values[k:]):
        counts[leaving] -= 1
        if counts[leaving] == 0:
            del counts[leaving]
        counts[entering] += 1
        result.append(len(counts))
    return result


def max_distance(values: Iterable[int]) -> int:
    """Return the largest index gap between two equal items, or 0 if none repeat."""
    first_seen: dict[int, int] = {}
    best = 0
    for index, value in enumerate(values):
        if value in first_seen:
            best = max(best, index - first_seen[value])
        else:
            first_seen[value] = index
    return best


def count_equal_zero_one_subarrays(values: Iterable[int]) -> int:
    """Count contiguous runs with as many zeros as ones (non-zero counts as one)."""
    seen = Counter({0: 1})
    balance = 0
    total = 0
    for value in values:
        balance += -1 if value == 0 else 1
        total += seen[balance]
        seen[balance] += 1
    return total


def is_subset(a: Iterable[int], b: Iterable[int]) -> bool:
    """Return True if every item of ``b`` occurs in ``a`` (multiplicity ignored)."""
    present = set(a)
    return all(item in present for item in b)
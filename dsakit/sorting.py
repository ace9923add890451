"""Comparison sorts: bubble, selection, insertion, merge and quick sort."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, bubbling the largest remaining item right each pass."""
    items = list(values)
    n = len(items)
    for done in range(1, n):
        for i in range(n - done):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, settling the smallest remaining item at each position."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(i + 1, n):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, placing each item among the already sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        for j in range(i):
            if items[i] < items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy by splitting in halves and merging them (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around its last item; return the pivot's index.

    Items smaller than the pivot end up to its left, the rest to its right.
    """
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    i += 1
    values[i], values[high] = values[high], values[i]
    return i


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using quick sort with the last item as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items
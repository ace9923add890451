"""Classic array algorithms: searching, two pointers, sliding windows and more."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence


class FixedArray:
    """An array of bounded capacity with positional insert and remove."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def insert(self, value: int, position: int) -> None:
        """Insert ``value`` at ``position``, shifting later items right."""
        size = len(self._items)
        if not 0 <= position <= size:
            raise IndexError(
                f"Invalid position. Valid positions are from 0 to {size}."
            )
        if size >= self.capacity:
            raise OverflowError(f"array is full (capacity {self.capacity})")
        self._items.insert(position, value)

    def remove(self, position: int) -> int:
        """Remove and return the item at ``position``, shifting later items left."""
        size = len(self._items)
        if not 0 <= position < size:
            raise IndexError(
                f"Invalid position. Valid positions are from 0 to {size}."
            )
        return self._items.pop(position)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __repr__(self) -> str:
        return f"FixedArray({self._items!r}, capacity={self.capacity})"


def binary_search(values: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``values``, or -1 if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if target < values[mid]:
            end = mid - 1
        elif target > values[mid]:
            start = mid + 1
        else:
            return mid
    return -1


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse ``values`` by swapping from both ends toward the middle."""
    start, end = 0, len(values) - 1
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def max_water(heights: Sequence[int]) -> int:
    """Return the largest area held between two lines, using two pointers."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        area = min(heights[left], heights[right]) * (right - left)
        best = max(best, area)
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def fast_power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` by binary exponentiation."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    square = base
    while exponent > 0:
        if exponent % 2 == 1:
            result *= square
        square *= square
        exponent //= 2
    return result


def majority_element(values: Sequence[int]) -> int:
    """Return the Moore voting candidate for the majority element."""
    if not values:
        raise ValueError("majority_element() of an empty sequence")
    count = 0
    candidate = values[0]
    for value in values:
        if count == 0:
            candidate = value
        if value == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    if not values:
        raise ValueError("max_subarray_sum() of an empty sequence")
    best = values[0]
    current = 0
    for value in values:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def pair_sum(values: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices ``(i, j)``, ``i < j``, of sorted ``values`` summing to ``target``."""
    i, j = 0, len(values) - 1
    while i < j:
        total = values[i] + values[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    raise ValueError(f"no pair sums to {target}")


def product_except_self(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other items."""
    n = len(values)
    result = [1] * n
    for i in range(1, n):
        result[i] = result[i - 1] * values[i - 1]
    suffix = 1
    for i in range(n - 2, -1, -1):
        suffix *= values[i + 1]
        result[i] *= suffix
    return result


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Return the largest sum of any window of ``k`` consecutive items."""
    if not 0 < k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}")
    window = sum(values[:k])
    best = window
    for leaving, entering in zip(values, values[k:]):
        window += entering - leaving
        best = max(best, window)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    if not prices:
        raise ValueError("max_profit() of an empty sequence")
    best_buy = prices[0]
    profit = 0
    for price in prices[1:]:
        if price > best_buy:
            profit = max(profit, price - best_buy)
        best_buy = min(best_buy, price)
    return profit
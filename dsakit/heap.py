"""A binary max-heap and heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence


class MaxHeap:
    """A binary max-heap kept in a list, the largest item at the root."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` and move it up until its parent is not smaller."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] < items[index]:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                break

    def delete_root(self) -> int:
        """Remove and return the largest item."""
        items = self._items
        if not items:
            raise IndexError("There is nothing to delete.")
        root = items[0]
        last = items.pop()
        if items:
            items[0] = last
            heapify(items, len(items), 0)
        return root

    def peek(self) -> int:
        """Return the largest item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the items in their array (level) order."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"


def heapify(values: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items of a max-heap."""
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[largest] < values[left]:
            largest = left
        if right < size and values[largest] < values[right]:
            largest = right
        if largest == index:
            return
        values[largest], values[index] = values[index], values[largest]
        index = largest


def build_max_heap(values: MutableSequence[int]) -> None:
    """Rearrange ``values`` in place into max-heap order."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        heapify(values, size, index)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using heap sort."""
    items = list(values)
    build_max_heap(items)
    for size in range(len(items) - 1, 0, -1):
        items[0], items[size] = items[size], items[0]
        heapify(items, size, 0)
    return items
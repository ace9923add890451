"""Queues built on fixed storage, and problems solved with a queue."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple

DEFAULT_CAPACITY = 100001


class ArrayQueue:
    """A FIFO queue over a fixed run of slots.

    A slot is used up by each enqueue. The slots are all handed back only
    when the queue becomes empty again.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[int] = deque()
        self._used = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        if self._used == self.capacity:
            raise OverflowError("Queue is Full")
        self._items.append(value)
        self._used += 1

    def dequeue(self) -> int:
        """Remove and return the item at the front."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        value = self._items.popleft()
        if not self._items:
            self._used = 0
        return value

    def front(self) -> int:
        """Return the item at the front without removing it."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self._items)!r}, capacity={self.capacity})"


class LinearQueue:
    """A FIFO queue whose slots are never reused: at most ``capacity`` enqueues."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[int] = deque()
        self._enqueued = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        if self._enqueued == self.capacity:
            raise OverflowError(f"Queue is full. Cannot enqueue {value}")
        self._items.append(value)
        self._enqueued += 1

    def dequeue(self) -> int:
        """Remove and return the item at the front."""
        if not self._items:
            raise IndexError("Queue is empty. Cannot dequeue.")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Queue is empty."
        return "Queue elements: " + " ".join(map(str, self._items))

    def __repr__(self) -> str:
        return f"LinearQueue({list(self._items)!r}, capacity={self.capacity})"


class CircularQueue:
    """A FIFO queue in a ring of ``capacity`` slots that wraps around."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[int | None] = [None] * capacity
        self._head = 0
        self._size = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        if self._size == self.capacity:
            raise OverflowError("Queue is Full")
        self._slots[(self._head + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the item at the front."""
        if self._size == 0:
            raise IndexError("Queue is Empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._size -= 1
        self._head = 0 if self._size == 0 else (self._head + 1) % self.capacity
        assert value is not None
        return value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for offset in range(self._size):
            value = self._slots[(self._head + offset) % self.capacity]
            assert value is not None
            yield value

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"


class PetrolPump(NamedTuple):
    """A pump on a circular route: fuel it gives, distance to the next pump."""

    petrol: int
    distance: int


def tour_start(pumps: Iterable[tuple[int, int]]) -> int:
    """Return the first pump from which the whole circle can be driven, or -1."""
    deficit = 0
    balance = 0
    start = 0
    for index, (petrol, distance) in enumerate(pumps):
        balance += petrol - distance
        if balance < 0:
            start = index + 1
            deficit += balance
            balance = 0
    return start if balance + deficit >= 0 else -1


def first_negative_in_windows(values: Sequence[int], k: int) -> list[int]:
    """Return the first negative item of every window of ``k`` items, 0 if none."""
    if not 0 < k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}")
    negatives: deque[int] = deque(i for i in range(k) if values[i] < 0)
    result = [values[negatives[0]] if negatives else 0]
    for i in range(k, len(values)):
        if negatives and i - negatives[0] >= k:
            negatives.popleft()
        if values[i] < 0:
            negatives.append(i)
        result.append(values[negatives[0]] if negatives else 0)
    return result


def first_non_repeating(text: str) -> str:
    """Return, after each character, the first one seen only once so far, or '#'."""
    counts: Counter[str] = Counter()
    pending: deque[str] = deque()
    result: list[str] = []
    for ch in text:
        pending.append(ch)
        counts[ch] += 1
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        result.append(pending[0] if pending else "#")
    return "".join(result)


def reverse_queue(queue: Iterable[int]) -> deque[int]:
    """Return a new queue holding the items of ``queue`` in reverse order."""
    stack = list(queue)
    reversed_queue: deque[int] = deque()
    while stack:
        reversed_queue.append(stack.pop())
    return reversed_queue
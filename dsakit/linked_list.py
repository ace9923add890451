"""Singly linked lists: building, de-duplicating, cloning, palindromes and 0/1/2 sorting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import chain, repeat


@dataclass(eq=False)
class Node:
    """A list node; ``random`` may point at any node, or at nothing."""

    data: int
    next: Node | None = field(default=None, repr=False)
    random: Node | None = field(default=None, repr=False)


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[int]) -> Node | None:
    """Build a list holding ``values`` in order and return its head."""
    dummy = Node(-1)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_list(head: Node | None) -> list[int]:
    """Return the data of every node, head first."""
    return [node.data for node in _nodes(head)]


def insert_at_head(head: Node | None, value: int) -> Node:
    """Put a new node holding ``value`` in front of ``head`` and return it."""
    return Node(value, head)


def remove_duplicates(head: Node | None) -> Node | None:
    """Unlink every node whose data appeared earlier in the list; return the head."""
    if head is None:
        return None
    seen = {head.data}
    node = head
    while node.next is not None:
        if node.next.data in seen:
            node.next = node.next.next
        else:
            seen.add(node.next.data)
            node = node.next
    return head


def clone_with_random(head: Node | None) -> Node | None:
    """Return a deep copy of the list, ``next`` and ``random`` links included.

    A ``random`` link to a node outside the list is not copied.
    """
    copies = {node: Node(node.data) for node in _nodes(head)}
    for original, copy in copies.items():
        copy.next = copies.get(original.next)
        copy.random = copies.get(original.random)
    return copies.get(head)


def is_palindrome_by_copy(head: Node | None) -> bool:
    """Return True if the data reads the same both ways, using a copy of it."""
    values = to_list(head)
    return values == values[::-1]


def _middle(head: Node) -> Node:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]
    return slow


def _reverse(head: Node | None) -> Node | None:
    prev = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def is_palindrome(head: Node | None) -> bool:
    """Return True if the data reads the same both ways, in constant extra space.

    The second half is reversed for the comparison and restored afterwards.
    """
    if head is None or head.next is None:
        return True
    middle = _middle(head)
    middle.next = _reverse(middle.next)
    try:
        for left, right in zip(_nodes(head), _nodes(middle.next)):
            if left.data != right.data:
                return False
        return True
    finally:
        middle.next = _reverse(middle.next)


def _check_012(head: Node | None) -> Counter[int]:
    counts = Counter(node.data for node in _nodes(head))
    invalid = set(counts) - {0, 1, 2}
    if invalid:
        raise ValueError(f"list holds values other than 0, 1 and 2: {sorted(invalid)}")
    return counts


def sort_012_by_count(head: Node | None) -> Node | None:
    """Sort a list of 0s, 1s and 2s by counting them and rewriting the data."""
    counts = _check_012(head)
    ordered = chain.from_iterable(repeat(value, counts[value]) for value in (0, 1, 2))
    for node, value in zip(_nodes(head), ordered):
        node.data = value
    return head


def sort_012(head: Node | None) -> Node | None:
    """Sort a list of 0s, 1s and 2s by relinking its nodes; return the new head."""
    _check_012(head)
    heads = {value: Node(-1) for value in (0, 1, 2)}
    tails = dict(heads)
    node = head
    while node is not None:
        following = node.next
        tails[node.data].next = node
        tails[node.data] = node
        node = following
    dummy = Node(-1)
    tail = dummy
    for value in (0, 1, 2):
        if heads[value].next is not None:
            tail.next = heads[value].next
            tail = tails[value]
    tail.next = None
    return dummy.next
"""Binary trees: building, traversals, views and path problems."""

from __future__ import annotations

import sys
from collections import defaultdict, deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

NULL_MARKER = -1


@dataclass
class TreeNode:
    """A binary tree node; equality compares whole subtrees."""

    data: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _next_value(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def build_preorder(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from values in preorder, ``-1`` marking a missing child."""
    stream = iter(values)

    def build() -> TreeNode | None:
        data = _next_value(stream)
        if data == NULL_MARKER:
            return None
        node = TreeNode(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from values in level order, ``-1`` marking a missing child.

    After the root, each queued node takes two values: its left and right child.
    """
    stream = iter(values)
    try:
        first = next(stream)
    except StopIteration:
        return None
    if first == NULL_MARKER:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _next_value(stream)
        if left != NULL_MARKER:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = _next_value(stream)
        if right != NULL_MARKER:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the data of the tree level by level, left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def inorder(root: TreeNode | None) -> list[int]:
    """Return the data in left, node, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root: TreeNode | None) -> list[int]:
    """Return the data in node, left, right order."""
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def postorder(root: TreeNode | None) -> list[int]:
    """Return the data in left, right, node order."""
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.data]


def morris_inorder(root: TreeNode | None) -> list[int]:
    """Return the inorder data without a stack, by threading predecessors.

    The temporary threads are removed again, so the tree is left unchanged.
    """
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            result.append(current.data)
            current = current.right
    return result


def count_leaves(root: TreeNode | None) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.is_leaf:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def longest_path_sum(root: TreeNode | None) -> int:
    """Return the sum of the longest root-to-leaf path; ties go to the larger sum."""

    def solve(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        best = max(solve(node.left), solve(node.right))
        return best[0] + 1, best[1] + node.data

    return solve(root)[1]


def _by_distance(root: TreeNode | None) -> Iterator[tuple[TreeNode, int, int]]:
    """Yield (node, horizontal distance, level) in breadth-first order."""
    if root is None:
        return
    pending = deque([(root, 0, 0)])
    while pending:
        node, distance, level = pending.popleft()
        yield node, distance, level
        if node.left is not None:
            pending.append((node.left, distance - 1, level + 1))
        if node.right is not None:
            pending.append((node.right, distance + 1, level + 1))


def bottom_view(root: TreeNode | None) -> list[int]:
    """Return the lowest visible node of each vertical line, left to right."""
    seen: dict[int, int] = {}
    for node, distance, _ in _by_distance(root):
        seen[distance] = node.data
    return [seen[distance] for distance in sorted(seen)]


def top_view(root: TreeNode | None) -> list[int]:
    """Return the highest node of each vertical line, left to right."""
    seen: dict[int, int] = {}
    for node, distance, _ in _by_distance(root):
        seen.setdefault(distance, node.data)
    return [seen[distance] for distance in sorted(seen)]


def boundary(root: TreeNode | None) -> list[int]:
    """Return the root, left edge, leaves and reversed right edge, anticlockwise."""
    if root is None:
        return []
    result = [root.data]

    def left_edge(node: TreeNode | None) -> None:
        if node is None or node.is_leaf:
            return
        result.append(node.data)
        left_edge(node.left if node.left is not None else node.right)

    def leaves(node: TreeNode | None) -> None:
        if node is None:
            return
        if node.is_leaf:
            result.append(node.data)
            return
        leaves(node.left)
        leaves(node.right)

    def right_edge(node: TreeNode | None) -> None:
        if node is None or node.is_leaf:
            return
        right_edge(node.right if node.right is not None else node.left)
        result.append(node.data)

    left_edge(root.left)
    leaves(root.left)
    leaves(root.right)
    right_edge(root.right)
    return result


def flatten(root: TreeNode | None) -> None:
    """Relink the tree in place into a right-leaning chain in preorder."""
    current = root
    while current is not None:
        if current.left is not None:
            predecessor = current.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            predecessor.right = current.right
            current.right = current.left
            current.left = None
        current = current.right


def kth_ancestor(root: TreeNode | None, k: int, node: int) -> int:
    """Return the data of the ``k``-th ancestor of the node holding ``node``, or -1."""
    remaining = k

    def solve(current: TreeNode | None) -> TreeNode | None:
        nonlocal remaining
        if current is None:
            return None
        if current.data == node:
            return current
        left = solve(current.left)
        right = solve(current.right)
        if (left is None) == (right is None):
            return None
        remaining -= 1
        if remaining <= 0:
            remaining = sys.maxsize
            return current
        return left if left is not None else right

    answer = solve(root)
    if answer is None or answer.data == node:
        return -1
    return answer.data


def _first_per_level(root: TreeNode | None, right_first: bool) -> list[int]:
    result: list[int] = []

    def solve(current: TreeNode | None, level: int) -> None:
        if current is None:
            return
        if level == len(result):
            result.append(current.data)
        first, second = (
            (current.right, current.left) if right_first else (current.left, current.right)
        )
        solve(first, level + 1)
        solve(second, level + 1)

    solve(root, 0)
    return result


def left_view(root: TreeNode | None) -> list[int]:
    """Return the leftmost node of each level, top to bottom."""
    return _first_per_level(root, right_first=False)


def right_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost node of each level, top to bottom."""
    return _first_per_level(root, right_first=True)


def max_non_adjacent_sum(root: TreeNode | None) -> int:
    """Return the largest sum of nodes no two of which are parent and child."""

    def solve(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_with, left_without = solve(node.left)
        right_with, right_without = solve(node.right)
        with_node = node.data + left_without + right_without
        without_node = max(left_with, left_without) + max(right_with, right_without)
        return with_node, without_node

    return max(solve(root))


def vertical_order(root: TreeNode | None) -> list[int]:
    """Return the data line by line from left to right, each line top to bottom."""
    lines: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    for node, distance, level in _by_distance(root):
        lines[distance][level].append(node.data)
    return [
        data
        for distance in sorted(lines)
        for level in sorted(lines[distance])
        for data in lines[distance][level]
    ]


def zigzag(root: TreeNode | None) -> list[int]:
    """Return the data level by level, alternating left-to-right and right-to-left."""
    result: list[int] = []
    for depth, level in enumerate(level_order(root)):
        result.extend(level if depth % 2 == 0 else reversed(level))
    return result
"""Problems solved with a stack: brackets, histograms, celebrities and more.

A stack is a plain list whose last item is the top.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_OPENERS = {")": "(", "}": "{", "]": "["}
_OPERATORS = frozenset("+-*/")


def largest_histogram_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    bars = [*heights, 0]
    stack: list[int] = []
    best = 0
    for i, height in enumerate(bars):
        while stack and bars[stack[-1]] > height:
            top = stack.pop()
            width = i if not stack else i - stack[-1] - 1
            best = max(best, bars[top] * width)
        stack.append(i)
    return best


def is_balanced(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer and
    must match the most recent opening bracket.
    """
    stack: list[str] = []
    for ch in text:
        if ch in "({[":
            stack.append(ch)
        elif stack and _OPENERS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def min_bracket_reversals(text: str) -> int:
    """Return how many braces must be flipped to balance ``text``, or -1 if impossible.

    Every character other than ``'{'`` counts as a closing brace.
    """
    if len(text) % 2 == 1:
        return -1
    stack: list[str] = []
    for ch in text:
        if ch == "{":
            stack.append(ch)
        elif stack and stack[-1] == "{":
            stack.pop()
        else:
            stack.append(ch)
    opening = stack.count("{")
    closing = len(stack) - opening
    return (closing + 1) // 2 + (opening + 1) // 2


def find_celebrity(matrix: Sequence[Sequence[int]]) -> int:
    """Return the person everyone knows and who knows no one, or -1 if none.

    ``matrix[a][b] == 1`` means that ``a`` knows ``b``.
    """
    n = len(matrix)
    if n == 0:
        return -1
    candidates = list(range(n))
    while len(candidates) > 1:
        a = candidates.pop()
        b = candidates.pop()
        candidates.append(b if matrix[a][b] == 1 else a)
    candidate = candidates[0]
    if any(matrix[candidate][i] != 0 for i in range(n)):
        return -1
    if sum(1 for i in range(n) if matrix[i][candidate] == 1) != n - 1:
        return -1
    return candidate


def delete_middle(stack: list[int]) -> int:
    """Remove and return the middle item of ``stack``, counted from the top."""
    if not stack:
        raise IndexError("delete_middle() on an empty stack")
    return stack.pop(len(stack) - 1 - len(stack) // 2)


def insert_at_bottom(stack: Iterable[int], value: int) -> list[int]:
    """Return a new stack holding ``value`` below every item of ``stack``."""
    return [value, *stack]


def next_smaller(values: Sequence[int]) -> list[int]:
    """Return, for each item, the nearest strictly smaller item to its right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for i in range(len(values) - 1, -1, -1):
        current = values[i]
        while stack and stack[-1] >= current:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(current)
    return result


def has_redundant_brackets(text: str) -> bool:
    """Return True if some pair of parentheses encloses no operator."""
    stack: list[str] = []
    for ch in text:
        if ch == "(" or ch in _OPERATORS:
            stack.append(ch)
        elif ch == ")":
            redundant = True
            while True:
                if not stack:
                    raise ValueError("unmatched ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                redundant = False
            if redundant:
                return True
    return False


def reverse_stack(stack: list[int]) -> None:
    """Reverse ``stack`` in place, so the bottom item becomes the top."""
    stack.reverse()


def reverse_with_stack(text: str) -> str:
    """Return ``text`` reversed by pushing every character and popping them all."""
    stack = list(text)
    reversed_chars: list[str] = []
    while stack:
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)
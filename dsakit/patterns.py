"""Text patterns drawn row by row."""

from __future__ import annotations


def staircase(n: int) -> list[str]:
    """Return rows where row ``i`` is indented by ``i - 1`` cells and repeats ``i``."""
    return [
        "".join("  " if column < row else f"{row} " for column in range(1, n + 1))
        for row in range(1, n + 1)
    ]


def butterfly(n: int) -> list[str]:
    """Return the rows of a butterfly of stars with ``2 * n`` rows."""
    if n < 1:
        return []
    width = 2 * n - 1
    full = "*" * width

    def wing(i: int) -> str:
        return "*" * i + " " * (width - 2 * i) + "*" * i

    upper = [wing(i) for i in range(1, n)] + [full]
    lower = [full] + [wing(i) for i in range(n - 1, 0, -1)]
    return upper + lower
"""Backtracking: placing n queens and listing permutations."""

from __future__ import annotations


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens.

    Each board is a list of rows, ``'Q'`` for a queen and ``'.'`` for an
    empty square. Queens are placed column by column, trying rows top down.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    board = [["."] * n for _ in range(n)]
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            board[row][col] = "Q"
            place(col + 1)
            board[row][col] = "."
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions


def first_n_queens(n: int) -> list[list[int]] | None:
    """Return the first placement of ``n`` queens found row by row, or None.

    The board holds 1 where a queen stands and 0 elsewhere.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    board = [[0] * n for _ in range(n)]
    used_cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if col in used_cols or row - col in diagonals or row + col in anti_diagonals:
                continue
            used_cols.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            board[row][col] = 1
            if place(row + 1):
                return True
            board[row][col] = 0
            used_cols.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    return board if place(0) else None


def permutations(text: str) -> list[str]:
    """Return every ordering of the characters of ``text``, repeats included."""
    if not text:
        return [""]
    return [
        ch + rest
        for i, ch in enumerate(text)
        for rest in permutations(text[:i] + text[i + 1 :])
    ]
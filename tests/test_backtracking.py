import itertools

import pytest

from dsakit.backtracking import first_n_queens, permutations, solve_n_queens


def _queens(board, mark):
    return [
        (r, c)
        for r, row in enumerate(board)
        for c, cell in enumerate(row)
        if cell == mark
    ]


def _is_valid(positions, n):
    if len(positions) != n:
        return False
    rows = {r for r, _ in positions}
    cols = {c for _, c in positions}
    diag = {r - c for r, c in positions}
    anti = {r + c for r, c in positions}
    return len(rows) == len(cols) == len(diag) == len(anti) == n


@pytest.mark.parametrize("n", [4, 5, 6])
def test_every_solution_is_valid_and_distinct(n):
    solutions = solve_n_queens(n)
    assert solutions
    assert all(_is_valid(_queens(board, "Q"), n) for board in solutions)
    assert len({tuple(board) for board in solutions}) == len(solutions)
    assert all(len(row) == n for board in solutions for row in board)


def test_solution_counts():
    assert len(solve_n_queens(4)) == 2
    assert len(solve_n_queens(8)) == 92


def test_single_queen():
    assert solve_n_queens(1) == [["Q"]]


@pytest.mark.parametrize("n", [2, 3])
def test_no_solution(n):
    assert solve_n_queens(n) == []
    assert first_n_queens(n) is None


def test_negative_n_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)
    with pytest.raises(ValueError):
        first_n_queens(-1)


@pytest.mark.parametrize("n", [4, 5, 8])
def test_first_n_queens_is_valid(n):
    board = first_n_queens(n)
    assert board is not None
    assert _is_valid(_queens(board, 1), n)
    assert sum(map(sum, board)) == n


def test_first_n_queens_is_among_all_solutions():
    board = first_n_queens(6)
    assert board is not None
    as_text = ["".join("Q" if cell else "." for cell in row) for row in board]
    assert as_text in solve_n_queens(6)


def test_permutations_of_source_string():
    result = permutations("ABC")
    assert result == ["".join(p) for p in itertools.permutations("ABC")]
    assert len(set(result)) == 6


def test_permutations_keep_repeats():
    result = permutations("AAB")
    assert len(result) == 6
    assert sorted(set(result)) == sorted({"".join(p) for p in itertools.permutations("AAB")})


def test_permutations_of_empty_string():
    assert permutations("") == [""]
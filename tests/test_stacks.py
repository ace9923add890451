import pytest

from dsakit.stacks import (
    delete_middle,
    find_celebrity,
    has_redundant_brackets,
    insert_at_bottom,
    is_balanced,
    largest_histogram_area,
    min_bracket_reversals,
    next_smaller,
    reverse_stack,
    reverse_with_stack,
)


def test_histogram_worked_example():
    assert largest_histogram_area([2, 1, 5, 6, 2, 3]) == 10


def test_histogram_empty_and_single():
    assert largest_histogram_area([]) == 0
    assert largest_histogram_area([7]) == 7


@pytest.mark.parametrize(
    "heights",
    [[1, 2, 3], [3, 2, 1], [4, 4, 4, 4], [0, 5, 0, 5], [6, 2, 5, 4, 5, 1, 6]],
)
def test_histogram_bounds(heights):
    area = largest_histogram_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


@pytest.mark.parametrize("text", ["", "()", "[{()}]", "{}[]()", "(([]){})"])
def test_balanced(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["(", ")", "([)]", "(]", "a", "(()"])
def test_unbalanced(text):
    assert is_balanced(text) is False


def test_reversals_odd_length_is_impossible():
    assert min_bracket_reversals("{{}") == -1


def test_reversals_balanced_needs_none():
    assert min_bracket_reversals("{{}}") == 0
    assert min_bracket_reversals("") == 0


def test_reversals_swapped_pair():
    assert min_bracket_reversals("}{") == 2


def test_celebrity_found():
    n = 4
    celebrity = 2
    matrix = [[0] * n for _ in range(n)]
    for person in range(n):
        if person != celebrity:
            matrix[person][celebrity] = 1
    matrix[0][1] = 1
    matrix[3][0] = 1
    assert find_celebrity(matrix) == celebrity


def test_celebrity_absent():
    matrix = [[0, 1], [1, 0]]
    assert find_celebrity(matrix) == -1
    assert find_celebrity([[0, 0], [0, 0]]) == -1


def test_celebrity_single_person_and_empty():
    assert find_celebrity([[0]]) == 0
    assert find_celebrity([]) == -1


def test_delete_middle_odd():
    stack = [1, 2, 3, 4, 5]
    assert delete_middle(stack) == 3
    assert stack == [1, 2, 4, 5]


def test_delete_middle_even_removes_one_item():
    original = [10, 20, 30, 40]
    stack = list(original)
    removed = delete_middle(stack)
    assert len(stack) == len(original) - 1
    assert removed in original
    assert sorted(stack + [removed]) == original


def test_delete_middle_empty_raises():
    with pytest.raises(IndexError):
        delete_middle([])


def test_insert_at_bottom_returns_new_stack():
    stack = [1, 2, 3]
    result = insert_at_bottom(stack, 0)
    assert result == [0, 1, 2, 3]
    assert stack == [1, 2, 3]
    assert insert_at_bottom([], 9) == [9]


def test_next_smaller_decreasing_and_increasing():
    assert next_smaller([3, 2, 1]) == [2, 1, -1]
    assert next_smaller([1, 2, 3]) == [-1, -1, -1]
    assert next_smaller([]) == []


@pytest.mark.parametrize("values", [[4, 8, 5, 2, 25], [5, 5, 5], [2, 7, 1, 9, 3, 3]])
def test_next_smaller_invariant(values):
    result = next_smaller(values)
    assert len(result) == len(values)
    for i, answer in enumerate(result):
        rest = values[i + 1 :]
        if answer == -1:
            assert all(v >= values[i] for v in rest)
        else:
            assert answer < values[i]
            first = next(v for v in rest if v < values[i])
            assert answer == first


@pytest.mark.parametrize("text", ["((a+b))", "(a)", "a+(b)*c", "(a+(b))"])
def test_redundant(text):
    assert has_redundant_brackets(text) is True


@pytest.mark.parametrize("text", ["(a+b)", "a+b", "(a+b)*(c-d)", "((a+b)*c)"])
def test_not_redundant(text):
    assert has_redundant_brackets(text) is False


def test_redundant_unmatched_close_raises():
    with pytest.raises(ValueError):
        has_redundant_brackets("a+b)")


def test_reverse_stack_in_place():
    stack = [1, 2, 3, 4]
    reverse_stack(stack)
    assert stack == [4, 3, 2, 1]
    reverse_stack(stack)
    assert stack == [1, 2, 3, 4]


def test_reverse_with_stack():
    assert reverse_with_stack("Hello") == "olleH"
    assert reverse_with_stack("") == ""


@pytest.mark.parametrize("text", ["abc", "racecar", "x", "Hello, world"])
def test_reverse_with_stack_round_trip(text):
    once = reverse_with_stack(text)
    assert reverse_with_stack(once) == text
    assert once[:1] == text[-1:]
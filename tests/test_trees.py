import pytest

from dsakit.trees import (
    TreeNode,
    boundary,
    bottom_view,
    build_level_order,
    build_preorder,
    count_leaves,
    flatten,
    height,
    inorder,
    kth_ancestor,
    left_view,
    level_order,
    longest_path_sum,
    max_non_adjacent_sum,
    morris_inorder,
    postorder,
    preorder,
    right_view,
    top_view,
    vertical_order,
    zigzag,
)

SAMPLE_LEVEL = [1, 3, 5, 7, 11, 17, -1, -1, -1, -1, -1, -1, -1]
SAMPLE_PRE = [1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1]
BST_VALUES = [4, 2, 6, 1, 3, 5, 7]


def bst():
    return build_level_order(BST_VALUES + [-1] * 8)


def chain():
    return build_preorder([3, 2, 1, -1, -1, -1, -1])


def test_both_builders_give_same_tree():
    a = build_level_order(SAMPLE_LEVEL)
    b = build_preorder(SAMPLE_PRE)
    assert a == b
    assert inorder(a) == inorder(b)
    assert postorder(a) == postorder(b)


def test_preorder_build_round_trip():
    root = build_preorder(SAMPLE_PRE)
    assert preorder(root) == [v for v in SAMPLE_PRE if v != -1]


def test_level_order_build_round_trip():
    root = build_level_order(SAMPLE_LEVEL)
    levels = level_order(root)
    assert [v for level in levels for v in level] == [v for v in SAMPLE_LEVEL if v != -1]
    assert levels == [[1], [3, 5], [7, 11, 17]]


@pytest.mark.parametrize(
    "builder, values",
    [(build_preorder, [1, 2, -1]), (build_level_order, [1, 2, 3, -1])],
)
def test_builders_reject_truncated_input(builder, values):
    with pytest.raises(ValueError):
        builder(values)


def test_empty_trees():
    assert build_preorder([-1]) is None
    assert build_level_order([]) is None
    assert level_order(None) == []
    assert inorder(None) == preorder(None) == postorder(None) == []
    assert morris_inorder(None) == []


def test_inorder_of_bst_is_sorted():
    root = bst()
    assert inorder(root) == sorted(BST_VALUES)


def test_postorder_ends_with_root_and_holds_all():
    root = bst()
    result = postorder(root)
    assert result[-1] == root.data
    assert sorted(result) == sorted(BST_VALUES)


def test_morris_matches_inorder_and_restores_tree():
    root = build_level_order(SAMPLE_LEVEL)
    before = level_order(root)
    assert morris_inorder(root) == inorder(root)
    assert level_order(root) == before
    assert root == build_preorder(SAMPLE_PRE)


def test_height_equals_number_of_levels():
    for root in (bst(), chain(), build_level_order(SAMPLE_LEVEL)):
        assert height(root) == len(level_order(root))
    assert height(None) == 0
    assert height(TreeNode(8)) == 1


def test_count_leaves():
    root = bst()
    assert count_leaves(root) == len(level_order(root)[-1])
    assert count_leaves(chain()) == 1
    assert count_leaves(None) == 0


def test_left_and_right_views_match_level_edges():
    for root in (bst(), build_level_order(SAMPLE_LEVEL), chain()):
        levels = level_order(root)
        assert left_view(root) == [level[0] for level in levels]
        assert right_view(root) == [level[-1] for level in levels]


def test_views_of_left_chain():
    root = chain()
    assert top_view(root) == sorted([3, 2, 1])
    assert bottom_view(root) == sorted([3, 2, 1])


def test_top_and_bottom_view_of_sample():
    root = build_level_order(SAMPLE_LEVEL)
    assert top_view(root) == [7, 3, 1, 5]
    assert bottom_view(root) == [7, 3, 17, 5]
    assert top_view(None) == bottom_view(None) == []


def test_vertical_order():
    root = bst()
    result = vertical_order(root)
    assert sorted(result) == sorted(BST_VALUES)
    assert result == [1, 2, 4, 3, 5, 6, 7]
    assert vertical_order(None) == []


def test_boundary():
    assert boundary(bst()) == [4, 2, 1, 3, 5, 7, 6]
    assert boundary(TreeNode(9)) == [9]
    assert boundary(None) == []


def test_zigzag():
    root = bst()
    assert zigzag(root) == [4, 6, 2, 1, 3, 5, 7]
    assert sorted(zigzag(root)) == sorted(BST_VALUES)
    assert zigzag(None) == []


def test_flatten_gives_preorder_chain():
    root = build_level_order(SAMPLE_LEVEL)
    expected = preorder(root)
    flatten(root)
    walked = []
    node = root
    while node is not None:
        assert node.left is None
        walked.append(node.data)
        node = node.right
    assert walked == expected


def test_longest_path_beats_heavier_short_path():
    root = TreeNode(1, TreeNode(100), TreeNode(2, None, TreeNode(3)))
    assert longest_path_sum(root) == 1 + 2 + 3


def test_longest_path_sum_of_chain_and_empty():
    assert longest_path_sum(chain()) == sum([3, 2, 1])
    assert longest_path_sum(None) == 0


def test_longest_path_tie_takes_larger_sum():
    root = TreeNode(10, TreeNode(1), TreeNode(5))
    assert longest_path_sum(root) == 10 + 5


def test_kth_ancestor():
    root = bst()
    assert kth_ancestor(root, 1, 1) == 2
    assert kth_ancestor(root, 2, 1) == 4
    assert kth_ancestor(root, 1, 7) == 6
    assert kth_ancestor(root, 3, 1) == -1
    assert kth_ancestor(root, 1, 99) == -1
    assert kth_ancestor(root, 1, 4) == -1


def test_max_non_adjacent_sum():
    assert max_non_adjacent_sum(TreeNode(7)) == 7
    assert max_non_adjacent_sum(TreeNode(1, TreeNode(2), TreeNode(3))) == 2 + 3
    assert max_non_adjacent_sum(TreeNode(10, TreeNode(2), TreeNode(3))) == 10
    assert max_non_adjacent_sum(chain()) == 3 + 1
    assert max_non_adjacent_sum(None) == 0
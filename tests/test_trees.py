from dsakit.trees import (
    build_level_order,
    build_tree,
    inorder,
    level_order,
    postorder,
    preorder,
)

SAMPLE = [3, 7, 1, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1]
BST = [8, 3, 1, -1, -1, 6, -1, -1, 10, -1, 14, -1, -1]


def _present(values):
    return [v for v in values if v != -1]


def test_preorder_matches_input_order():
    assert preorder(build_tree(SAMPLE)) == _present(SAMPLE)


def test_level_order_of_sample():
    assert level_order(build_tree(SAMPLE)) == [[3], [7, 5], [1, 11, 17]]


def test_inorder_of_search_tree_is_sorted():
    root = build_tree(BST)
    assert inorder(root) == sorted(_present(BST))


def test_postorder_small():
    root = build_tree([1, 2, -1, -1, 3, -1, -1])
    assert postorder(root) == [2, 3, 1]


def test_traversals_hold_same_values():
    root = build_tree(SAMPLE)
    expected = sorted(_present(SAMPLE))
    assert sorted(inorder(root)) == expected
    assert sorted(postorder(root)) == expected
    assert postorder(root)[-1] == root.data
    assert preorder(root)[0] == root.data


def test_build_tree_stops_when_input_runs_out():
    root = build_tree([5, 6])
    assert root.data == 5
    assert root.left.data == 6
    assert root.right is None


def test_empty_trees():
    assert build_tree([]) is None
    assert build_tree([-1]) is None
    assert build_level_order([]) is None
    assert inorder(None) == []
    assert level_order(None) == []


def test_level_order_round_trip():
    values = [1, 2, 3, 4, -1, 5, 6, -1, -1, -1, -1, -1, -1]
    root = build_level_order(values)
    flattened = [v for level in level_order(root) for v in level]
    assert flattened == _present(values)
    assert root.left.right is None


def test_build_level_order_short_input():
    root = build_level_order([1, 2])
    assert root.left.data == 2
    assert root.right is None
    assert [v for level in level_order(root) for v in level] == [1, 2]
import pytest

from numkit.binary_tree import BinaryTree


def build(root, values):
    tree = BinaryTree(root)
    tree.extend(values)
    return tree


@pytest.mark.parametrize(
    "root, values",
    [(5, [3, 8, 1, 4, 9, 7]), (10, [1, 2, 3, 4]), (0, [-5, 5, -2, 2]), (5, [])],
)
def test_iteration_is_sorted(root, values):
    tree = build(root, values)
    assert list(tree) == sorted([root, *values])


def test_duplicate_of_parent_ignored():
    tree = build(5, [5, 5])
    assert list(tree) == [5]


def test_duplicate_below_other_node_kept():
    tree = build(5, [7, 5])
    assert list(tree) == [5, 5, 7]


def test_insert_one_by_one_matches_extend():
    a = build(5, [3, 8, 1])
    b = BinaryTree(5)
    for v in [3, 8, 1]:
        b.insert(v)
    assert list(a) == list(b)


def test_delete_leaves_removes_only_leaves():
    tree = build(5, [3, 8, 1, 4])
    tree.delete_leaves()
    assert list(tree) == [3, 5]


def test_delete_leaves_keeps_lone_root():
    tree = BinaryTree(5)
    tree.delete_leaves()
    assert list(tree) == [5]


def test_delete_leaves_repeatedly_shrinks_to_root():
    tree = build(5, [3, 8, 1, 4, 9, 7, 0])
    for _ in range(5):
        tree.delete_leaves()
    assert list(tree) == [5]


def test_format_ascending():
    tree = build(5, [3])
    assert tree.format_ascending() == "\n\nYour tree:\n    3    5\n"


def test_format_levels():
    tree = build(5, [3, 8])
    assert tree.format_levels() == "\n\nYour tree:\n     3\n  5\n     8\n\n"


def test_format_levels_has_one_line_per_node():
    values = [3, 8, 1, 4, 9]
    tree = build(5, values)
    body = tree.format_levels().split("Your tree:\n", 1)[1]
    lines = [line for line in body.split("\n") if line]
    assert [int(line) for line in lines] == sorted([5, *values])
import io
import random

import pytest

from csalgos.avl import AVLTree, main


def _check(tree):
    """Assert BST order, correct heights, AVL balance and parent links; return count."""

    def walk(node, parent, level, low, high):
        if node is None:
            return 0, 0
        assert node.parent is parent
        assert node.depth() == level
        if low is not None:
            assert node.data > low
        if high is not None:
            assert node.data < high
        lh, lc = walk(node.left, node, level + 1, low, node.data)
        rh, rc = walk(node.right, node, level + 1, node.data, high)
        assert node.height == 1 + max(lh, rh)
        assert abs(lh - rh) <= 1
        return node.height, lc + rc + 1

    return walk(tree.root, None, 0, None, None)[1]


def _build(values):
    tree = AVLTree()
    for v in values:
        tree.insert(v)
    return tree


def test_empty_tree():
    tree = AVLTree()
    assert tree.render() == ""
    assert list(tree) == []
    assert tree.find(5) is None
    assert 5 not in tree


def test_render_of_initial_values():
    tree = _build([9, 3, -3, 7])
    assert tree.render() == (
        "    9( 1   <==>   0 )\n"
        "        7( 0   <==>   0 )\n"
        "3( 1   <==>   2 )\n"
        "    -3( 0   <==>   0 )\n"
    )


def test_left_left_rotation_makes_middle_the_root():
    tree = _build([9, 3, -3])
    assert tree.root.data == 3
    assert _check(tree) == 3


@pytest.mark.parametrize("order", [[1, 2, 3], [3, 1, 2], [1, 3, 2], [3, 2, 1]])
def test_all_rotation_cases_balance(order):
    tree = _build(order)
    assert tree.root.data == 2
    assert list(tree) == [1, 2, 3]
    _check(tree)


def test_ascending_inserts_stay_balanced():
    tree = _build(range(1, 101))
    assert _check(tree) == 100
    assert list(tree) == list(range(1, 101))


def test_duplicate_insert_is_ignored():
    tree = _build([5, 3, 8])
    before = tree.render()
    tree.insert(3)
    assert tree.render() == before
    assert len(tree) == 3


def test_find_returns_node_with_value():
    tree = _build([10, 20, 30, 40])
    node = tree.find(30)
    assert node.data == 30
    assert 40 in tree
    assert 25 not in tree


def test_remove_missing_raises():
    tree = _build([1, 2])
    with pytest.raises(KeyError):
        tree.remove(99)
    assert list(tree) == [1, 2]


def test_remove_node_with_two_children():
    tree = _build([9, 3, -3, 7])
    tree.remove(3)
    assert list(tree) == [-3, 7, 9]
    assert 3 not in tree
    _check(tree)


def test_remove_everything():
    values = list(range(20))
    tree = _build(values)
    for v in values:
        tree.remove(v)
        _check(tree)
    assert tree.root is None
    assert tree.render() == ""


def test_random_operations_match_set():
    rng = random.Random(1234)
    tree = AVLTree()
    present = set()
    for _ in range(500):
        v = rng.randint(-50, 50)
        if v in present and rng.random() < 0.5:
            tree.remove(v)
            present.discard(v)
        else:
            tree.insert(v)
            present.add(v)
        assert _check(tree) == len(present)
    assert list(tree) == sorted(present)


def test_render_lists_values_descending():
    tree = _build([4, 2, 6, 1, 3, 5, 7])
    lines = tree.render().splitlines()
    shown = [int(line.strip().split("(")[0]) for line in lines]
    assert shown == sorted(tree, reverse=True)


def test_main_deletes_until_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0\n"))
    assert main(["5"]) == 0
    out = capsys.readouterr().out
    tree = _build([9, 3, -3, 7, 5])
    first = tree.render()
    tree.remove(3)
    assert out.startswith(first)
    assert tree.render() in out
    assert out.count("Enter a value to delete (0 to stop): ") == 2


def test_main_reports_missing_value(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("42 0"))
    assert main([]) == 0
    err = capsys.readouterr().err
    assert 'Sorry, "42" is not in tree!' in err


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == _build([9, 3, -3, 7]).render() + "Enter a value to delete (0 to stop): "
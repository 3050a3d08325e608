"""A self-balancing AVL tree of integers, with a small interactive command."""

from __future__ import annotations

import re
import sys
from typing import Iterator, Optional, Sequence

from csalgos.avl_node import AVLNode

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_PROMPT = "Enter a value to delete (0 to stop): "
_INITIAL_VALUES = (9, 3, -3, 7)


def _height(node: Optional[AVLNode]) -> int:
    return 0 if node is None else node.height


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(k2: AVLNode) -> AVLNode:
    """Single rotation pulling up the left child; returns the new subtree root."""
    subtree_parent = k2.parent
    k1 = k2.left
    assert k1 is not None
    k2.left = k1.right
    k1.right = k2
    _update_height(k2)
    k1.height = 1 + max(_height(k1.left), _height(k2))
    k2.parent = k1
    if k2.left is not None:
        k2.left.parent = k2
    k1.parent = subtree_parent
    return k1


def _rotate_left(k2: AVLNode) -> AVLNode:
    """Single rotation pulling up the right child; returns the new subtree root."""
    subtree_parent = k2.parent
    k1 = k2.right
    assert k1 is not None
    k2.right = k1.left
    k1.left = k2
    _update_height(k2)
    k1.height = 1 + max(_height(k1.right), _height(k2))
    k2.parent = k1
    if k2.right is not None:
        k2.right.parent = k2
    k1.parent = subtree_parent
    return k1


def _double_with_left_child(k3: AVLNode) -> AVLNode:
    assert k3.left is not None
    k3.left = _rotate_left(k3.left)
    return _rotate_right(k3)


def _double_with_right_child(k3: AVLNode) -> AVLNode:
    assert k3.right is not None
    k3.right = _rotate_right(k3.right)
    return _rotate_left(k3)


def _insert(node: Optional[AVLNode], value: int) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if value < node.data:
        child = _insert(node.left, value)
        node.left = child
        child.parent = node
        if _height(node.left) - _height(node.right) == 2:
            if value < child.data:
                node = _rotate_right(node)
            else:
                node = _double_with_left_child(node)
    elif value > node.data:
        child = _insert(node.right, value)
        node.right = child
        child.parent = node
        if _height(node.right) - _height(node.left) == 2:
            if value > child.data:
                node = _rotate_left(node)
            else:
                node = _double_with_right_child(node)
    _update_height(node)
    return node


def _remove(value: int, node: Optional[AVLNode]) -> Optional[AVLNode]:
    if node is None:
        return None

    if value < node.data:
        node.left = _remove(value, node.left)
    elif value > node.data:
        node.right = _remove(value, node.right)
    elif node.is_leaf():
        return None
    elif node.left is not None and node.right is not None:
        largest = node.left
        while largest.right is not None:
            largest = largest.right
        moved = largest.data
        node.left = _remove(moved, node.left)
        if node.left is not None:
            node.left.parent = node
        node.data = moved
    else:
        child = node.left if node.left is not None else node.right
        assert child is not None
        child.parent = node.parent
        node = child

    balance = _height(node.left) - _height(node.right)
    if balance == 2:
        assert node.left is not None
        sub_balance = _height(node.left.left) - _height(node.left.right)
        if sub_balance >= 0:
            node = _rotate_right(node)
        else:
            node = _double_with_left_child(node)
    if balance == -2:
        assert node.right is not None
        sub_balance = _height(node.right.left) - _height(node.right.right)
        if sub_balance < 0:
            node = _rotate_left(node)
        else:
            node = _double_with_right_child(node)

    _update_height(node)
    return node


class AVLTree:
    """A balanced binary search tree of distinct integers."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def find(self, value: int) -> Optional[AVLNode]:
        """Return the node holding ``value``, or None if it is absent."""
        node = self.root
        while node is not None:
            if node.data == value:
                return node
            node = node.right if node.data < value else node.left
        return None

    def insert(self, value: int) -> None:
        """Insert ``value``; inserting a value already present changes nothing."""
        self.root = _insert(self.root, value)

    def remove(self, value: int) -> None:
        """Remove ``value``, raising KeyError if it is not in the tree."""
        if self.find(value) is None:
            raise KeyError(value)
        self.root = _remove(value, self.root)

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, left below, one node a line.

        Each line is the node indented by its depth, followed by the heights
        of its left and right subtrees.
        """
        lines: list[str] = []

        def visit(node: Optional[AVLNode]) -> None:
            if node is None:
                return
            visit(node.right)
            lines.append(
                f"{'    ' * node.depth()}{node}"
                f"( {_height(node.left)}   <==>   {_height(node.right)} )\n"
            )
            visit(node.left)

        visit(self.root)
        return "".join(lines)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.find(value) is not None

    def __iter__(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)


def _atoi(text: str) -> int:
    """Parse the integer at the start of ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Build a tree, print it, then delete values read from standard input until 0."""
    args = list(sys.argv[1:] if argv is None else argv)
    tree = AVLTree()
    for value in _INITIAL_VALUES:
        tree.insert(value)
    for arg in args:
        tree.insert(_atoi(arg))

    sys.stdout.write(tree.render())

    tokens = _tokens(sys.stdin)
    while True:
        sys.stdout.write(_PROMPT)
        sys.stdout.flush()
        token = next(tokens, None)
        if token is None:
            break
        try:
            value = int(token)
        except ValueError:
            print(f"not an integer: {token!r}", file=sys.stderr)
            return 1
        if value == 0:
            break
        try:
            tree.remove(value)
        except KeyError:
            print(f'Sorry, "{value}" is not in tree!', file=sys.stderr)
        sys.stdout.write(tree.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
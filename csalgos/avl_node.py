"""A node of an AVL tree, linked to its children and its parent."""

from __future__ import annotations

from typing import Optional


class AVLNode:
    """Holds one value, links to left, right and parent nodes, and a height.

    A fresh node is a leaf of height 1.
    """

    __slots__ = ("data", "left", "right", "parent", "height")

    def __init__(self, data: int = 0) -> None:
        self.data = data
        self.left: Optional[AVLNode] = None
        self.right: Optional[AVLNode] = None
        self.parent: Optional[AVLNode] = None
        self.height = 1

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        return self.parent is None

    def depth(self) -> int:
        """Number of ancestors above this node."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return f"AVLNode({self.data!r}, height={self.height})"
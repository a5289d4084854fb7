"""
clue_tree.py
============
Sorted set of the clues the player has discovered.

Backed by an unbalanced binary search tree: smaller clues to the left,
greater clues to the right, duplicates ignored. An in-order walk therefore
yields the clues in ascending order, which is how they are listed to the
player before the accusation.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional


class ClueNode:
    """Internal BST node holding one clue."""

    __slots__ = ("clue", "left", "right")

    def __init__(self, clue: str) -> None:
        self.clue = clue
        self.left: Optional[ClueNode] = None
        self.right: Optional[ClueNode] = None


def insert_clue(root: Optional[ClueNode], clue: str) -> ClueNode:
    """
    Insert `clue` below `root` and return the root to rebind.

    Strictly smaller clues go left, strictly greater ones go right; a clue
    equal to an existing node leaves the tree untouched.

    Args:
        root: Current root, or None for an empty tree.
        clue: The clue to add.

    Returns:
        The new leaf when the tree was empty, otherwise `root` itself.
    """
    if root is None:
        return ClueNode(clue)
    if clue < root.clue:
        root.left = insert_clue(root.left, clue)
    elif clue > root.clue:
        root.right = insert_clue(root.right, clue)
    return root


def traverse_in_order(root: Optional[ClueNode], visit: Callable[[str], None]) -> None:
    """Call `visit` on every clue, left subtree first, in ascending order."""
    if root is None:
        return
    traverse_in_order(root.left, visit)
    visit(root.clue)
    traverse_in_order(root.right, visit)


class ClueCollection:
    """
    The player's clue notebook.

    Thin owner of a ClueNode tree that tracks its size and offers the usual
    container protocol. Iteration is always in ascending order.
    """

    def __init__(self) -> None:
        self.root: Optional[ClueNode] = None
        self._size = 0

    def add(self, clue: str) -> bool:
        """
        Record a clue.

        Returns:
            True if the clue was new, False if it was already collected.
        """
        if clue in self:
            return False
        self.root = insert_clue(self.root, clue)
        self._size += 1
        return True

    def to_list(self) -> List[str]:
        clues: List[str] = []
        traverse_in_order(self.root, clues.append)
        return clues

    def clear(self) -> None:
        self.root = None
        self._size = 0

    def __contains__(self, clue: str) -> bool:
        node = self.root
        while node is not None:
            if clue == node.clue:
                return True
            node = node.left if clue < node.clue else node.right
        return False

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        return f"ClueCollection(clues={self.to_list()!r})"

"""Binary search tree with in-order printing and leaf pruning."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _prune(node: _Node) -> None:
    for side in ("left", "right"):
        child = getattr(node, side)
        if child is None:
            continue
        if child.left is not None or child.right is not None:
            _prune(child)
        else:
            setattr(node, side, None)


def _levels(node: Optional[_Node], level: int) -> Iterator[tuple[int, Any]]:
    if node is None:
        return
    yield from _levels(node.left, level + 1)
    yield level, node.value
    yield from _levels(node.right, level + 1)


class BinaryTree:
    """Binary search tree; equal values descend to the right."""

    def __init__(self, root: Any) -> None:
        self._root = _Node(root)

    def insert(self, value: Any) -> None:
        """Insert ``value`` unless it equals the node it would hang from."""
        parent = self._root
        while True:
            child = parent.left if value < parent.value else parent.right
            if child is None:
                break
            parent = child
        if value < parent.value:
            parent.left = _Node(value)
        elif value > parent.value:
            parent.right = _Node(value)

    def extend(self, values: Iterable[Any]) -> None:
        """Insert each value in order."""
        for value in values:
            self.insert(value)

    def __iter__(self) -> Iterator[Any]:
        """Values in ascending (in-order) order."""
        return (value for _, value in _levels(self._root, 0))

    def delete_leaves(self) -> None:
        """Remove every current leaf except the root itself."""
        _prune(self._root)

    def format_ascending(self) -> str:
        """Render the values in ascending order on one line."""
        values = "".join(f"{v:>5}" for v in self)
        return f"\n\nYour tree:\n{values}\n"

    def format_levels(self) -> str:
        """Render the tree sideways, one node per line, indented by depth."""
        lines = "".join(
            " " * (3 * level) + f"{value:>3}\n" for level, value in _levels(self._root, 0)
        )
        return f"\n\nYour tree:\n{lines}\n"
"""Checks, queries and repairs for binary search trees."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Optional

from algokit.trees import Node, inorder


def _inorder_nodes(root: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def recover_bst(root: Optional[Node]) -> Optional[Node]:
    """Swap back the values of the two nodes exchanged by mistake, in place.

    Raises ValueError when no node is out of order. Returns the root.
    """
    first: Optional[Node] = None
    second: Optional[Node] = None
    previous: Optional[Node] = None
    for node in _inorder_nodes(root):
        if previous is not None and previous.data > node.data:
            if first is None:
                first = previous
            second = node
        previous = node
    if first is None or second is None:
        raise ValueError("tree has no misplaced pair of nodes")
    first.data, second.data = second.data, first.data
    return root


def lowest_common_ancestor(root: Optional[Node], first: Node, second: Node) -> Optional[Node]:
    """The deepest node of a search tree lying above the values of both given nodes."""
    node = root
    while node is not None:
        if first.data < node.data and second.data < node.data:
            node = node.left
        elif first.data > node.data and second.data > node.data:
            node = node.right
        else:
            return node
    return None


def is_bst(root: Optional[Node]) -> bool:
    """Tell whether the in-order values are strictly increasing."""
    values = inorder(root)
    return all(a < b for a, b in zip(values, values[1:]))


def is_bst_bounds(root: Optional[Node]) -> bool:
    """Tell whether every node lies strictly between the bounds set by its ancestors."""

    def valid(node: Optional[Node], lower: Optional[int], upper: Optional[int]) -> bool:
        if node is None:
            return True
        if lower is not None and node.data <= lower:
            return False
        if upper is not None and node.data >= upper:
            return False
        return valid(node.left, lower, node.data) and valid(node.right, node.data, upper)

    return valid(root, None, None)


def kth_smallest(root: Optional[Node], k: int) -> int:
    """The k-th smallest value (1-based) in a search tree.

    Raises ValueError when the tree holds fewer than k values or k is below 1.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    node = next(islice(_inorder_nodes(root), k - 1, None), None)
    if node is None:
        raise ValueError(f"tree holds fewer than {k} values")
    return node.data
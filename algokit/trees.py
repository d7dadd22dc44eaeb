"""Binary tree nodes and the usual traversals, views and measures over them."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=True)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> Iterator[Node]:
        """The present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


def _levels(root: Optional[Node]) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in node.children()]


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Values level by level, each level read left to right."""
    return [[node.data for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[Node]) -> list[list[int]]:
    """Values level by level, alternating left-to-right and right-to-left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def right_side_view(root: Optional[Node]) -> list[int]:
    """The rightmost value of every level."""
    return [values[-1] for values in level_order(root)]


def height(root: Optional[Node]) -> int:
    """Number of edges on the longest root-to-leaf path; -1 for an empty tree."""
    if root is None:
        return -1
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[Node]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = depth(node.left), depth(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def mirror(root: Optional[Node]) -> Optional[Node]:
    """Swap left and right children throughout the tree, in place; returns the root."""
    if root is not None:
        mirror(root.left)
        mirror(root.right)
        root.left, root.right = root.right, root.left
    return root


def _preorder_nodes(root: Optional[Node]) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def preorder(root: Optional[Node]) -> list[int]:
    """Values in root, left, right order."""
    return [node.data for node in _preorder_nodes(root)]


def inorder(root: Optional[Node]) -> list[int]:
    """Values in left, root, right order."""
    result: list[int] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def _edge(start: Optional[Node], prefer_left: bool) -> list[int]:
    values: list[int] = []
    node = start
    while node is not None and not node.is_leaf:
        values.append(node.data)
        first, second = (node.left, node.right) if prefer_left else (node.right, node.left)
        node = first if first is not None else second
    return values


def boundary_traversal(root: Optional[Node]) -> list[int]:
    """Anticlockwise boundary: root, left edge, leaves left to right, right edge upwards."""
    if root is None:
        return []
    result = [] if root.is_leaf else [root.data]
    result.extend(_edge(root.left, prefer_left=True))
    result.extend(node.data for node in _preorder_nodes(root) if node.is_leaf)
    result.extend(reversed(_edge(root.right, prefer_left=False)))
    return result


def max_path_sum(root: Optional[Node]) -> int:
    """Largest sum along any path between two nodes; 0 for an empty tree."""
    if root is None:
        return 0
    best = -math.inf

    def gain(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.data + left + right)
        return node.data + max(left, right)

    gain(root)
    return int(best)


def _columns(root: Optional[Node]) -> Iterator[tuple[int, Node]]:
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, column = queue.popleft()
        yield column, node
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))


def bottom_view(root: Optional[Node]) -> list[int]:
    """For each vertical line from left to right, the last node met breadth-first."""
    seen: dict[int, int] = {}
    for column, node in _columns(root):
        seen[column] = node.data
    return [seen[column] for column in sorted(seen)]


def top_view(root: Optional[Node]) -> list[int]:
    """For each vertical line from left to right, the first node met breadth-first."""
    seen: dict[int, int] = {}
    for column, node in _columns(root):
        seen.setdefault(column, node.data)
    return [seen[column] for column in sorted(seen)]


def is_symmetric(root: Optional[Node]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    if root is None:
        return True
    pairs = [(root.left, root.right)]
    while pairs:
        a, b = pairs.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.data != b.data:
            return False
        pairs.append((a.left, b.right))
        pairs.append((a.right, b.left))
    return True
"""Binary tree construction, traversal and structural queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from a preorder sequence where -1 marks a missing child."""
    stream: Iterator[int] = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            data = next(stream)
        except StopIteration:
            raise ValueError("preorder sequence ended before the tree was complete") from None
        if data == NULL_MARKER:
            return None
        node = TreeNode(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values level by level, left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    current = deque([root])
    while current:
        levels.append([node.data for node in current])
        current = deque(
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        )
    return levels


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return values in node, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Return values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""

    def walk(node: Optional[TreeNode]) -> tuple[int, int]:
        # (longest path in nodes, height)
        if node is None:
            return 0, 0
        left_diam, left_height = walk(node.left)
        right_diam, right_height = walk(node.right)
        through = left_height + right_height + 1
        return max(left_diam, right_diam, through), max(left_height, right_height) + 1

    if root is None:
        return 0
    return walk(root)[0] - 1


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """True when both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.data == q.data and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrors(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.data == q.data and _mirrors(p.left, q.right) and _mirrors(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """True when the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """True when subtree heights differ by at most one at every node."""

    def check(node: Optional[TreeNode]) -> tuple[bool, int]:
        if node is None:
            return True, 0
        left_ok, left_height = check(node.left)
        right_ok, right_height = check(node.right)
        balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
        return balanced, max(left_height, right_height) + 1

    return check(root)[0]


def is_sum_tree(root: Optional[TreeNode]) -> bool:
    """True when every non-leaf node equals the sum of its subtrees."""

    def check(node: Optional[TreeNode]) -> tuple[bool, int]:
        if node is None:
            return True, 0
        if node.left is None and node.right is None:
            return True, node.data
        left_ok, left_sum = check(node.left)
        right_ok, right_sum = check(node.right)
        ok = left_ok and right_ok and node.data == left_sum + right_sum
        return ok, left_sum + right_sum + node.data

    return check(root)[0]


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node having both ``p`` and ``q`` (by identity) as descendants."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def kth_ancestor(root: Optional[TreeNode], k: int, node: int) -> int:
    """Value of the k-th ancestor of the node holding ``node``, or -1."""
    remaining = k
    answer = -1

    def search(current: Optional[TreeNode]) -> bool:
        nonlocal remaining, answer
        if current is None:
            return False
        if current.data == node:
            return True
        found_left = search(current.left)
        found_right = search(current.right)
        found = found_left or found_right
        if found:
            remaining -= 1
        if remaining == 0:
            answer = current.data
            remaining = -1
        return found

    search(root)
    return answer


def path_sum(root: Optional[TreeNode], target: int) -> list[list[int]]:
    """All root-to-leaf paths whose values add up to ``target``, left to right."""
    paths: list[list[int]] = []
    path: list[int] = []

    def walk(node: Optional[TreeNode], total: int) -> None:
        if node is None:
            return
        path.append(node.data)
        total += node.data
        walk(node.left, total)
        walk(node.right, total)
        if total == target and node.left is None and node.right is None:
            paths.append(list(path))
        path.pop()

    walk(root, 0)
    return paths


def _check_lengths(inorder_values: Sequence[int], other: Sequence[int]) -> None:
    if len(inorder_values) != len(other):
        raise ValueError("traversals must have the same length")


def build_from_inorder_preorder(
    inorder_values: Sequence[int], preorder_values: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and preorder traversals."""
    _check_lengths(inorder_values, preorder_values)
    positions = {value: index for index, value in enumerate(inorder_values)}
    values = iter(preorder_values)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        element = next(values, None)
        if element is None:
            return None
        if element not in positions:
            raise ValueError(f"value {element} is missing from the inorder traversal")
        root = TreeNode(element)
        pos = positions[element]
        root.left = build(start, pos - 1)
        root.right = build(pos + 1, end)
        return root

    return build(0, len(inorder_values) - 1)


def build_from_inorder_postorder(
    inorder_values: Sequence[int], postorder_values: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder traversals."""
    _check_lengths(inorder_values, postorder_values)
    inorder_list = list(inorder_values)
    values = reversed(list(postorder_values))

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        element = next(values, None)
        if element is None:
            return None
        try:
            pos = inorder_list.index(element)
        except ValueError:
            raise ValueError(
                f"value {element} is missing from the inorder traversal"
            ) from None
        root = TreeNode(element)
        root.right = build(pos + 1, end)
        root.left = build(start, pos - 1)
        return root

    return build(0, len(inorder_list) - 1)
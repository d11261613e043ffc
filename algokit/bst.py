"""Binary search tree construction, lookup and conversion to a sorted list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from algokit.binary_tree import NULL_MARKER, TreeNode


def insert(root: Optional[TreeNode], data: int) -> TreeNode:
    """Insert ``data`` and return the root; equal values go to the right."""
    node = TreeNode(data)
    if root is None:
        return node
    current = root
    while True:
        if current.data > data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[int]) -> Optional[TreeNode]:
    """Insert values in order until the -1 marker or the end of input."""
    root: Optional[TreeNode] = None
    for value in values:
        if value == NULL_MARKER:
            break
        root = insert(root, value)
    return root


def search(root: Optional[TreeNode], target: int) -> Optional[TreeNode]:
    """Return the node holding ``target``, or None."""
    current = root
    while current is not None:
        if current.data == target:
            return current
        current = current.right if target > current.data else current.left
    return None


def min_value(root: Optional[TreeNode]) -> int:
    """Smallest value in the tree, or -1 when it is empty."""
    if root is None:
        return -1
    current = root
    while current.left is not None:
        current = current.left
    return current.data


def max_value(root: Optional[TreeNode]) -> int:
    """Largest value in the tree, or -1 when it is empty."""
    if root is None:
        return -1
    current = root
    while current.right is not None:
        current = current.right
    return current.data


def bst_from_sorted(values: Sequence[int]) -> Optional[TreeNode]:
    """Build a balanced search tree from values already in sorted order."""

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = (start + end) // 2
        node = TreeNode(values[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(values) - 1)


def to_sorted_dll(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree in place into a sorted doubly linked list.

    ``left`` becomes the previous link and ``right`` the next link.
    Returns the head of the list.
    """
    head: Optional[TreeNode] = None

    def convert(node: Optional[TreeNode]) -> None:
        nonlocal head
        if node is None:
            return
        convert(node.right)
        node.right = head
        if head is not None:
            head.left = node
        head = node
        convert(node.left)

    convert(root)
    if head is not None:
        head.left = None
    return head


def iter_dll(head: Optional[TreeNode]) -> Iterator[int]:
    """Yield values of a list produced by :func:`to_sorted_dll`."""
    current = head
    while current is not None:
        yield current.data
        current = current.right
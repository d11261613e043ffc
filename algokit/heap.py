"""Array-backed max heap, heap sort and max-heap checks for binary trees."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from typing import Optional

from algokit.binary_tree import TreeNode

DEFAULT_CAPACITY = 100


class MaxHeap:
    """A bounded max heap stored in a list."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[int] = []

    def insert(self, value: int) -> None:
        """Add ``value`` and sift it up to its place."""
        if len(self._items) >= self.capacity:
            raise IndexError("heap is full")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def delete(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("delete from an empty heap")
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            heapify(items, len(items), 0)
        return top

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)


def heapify(values: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items."""
    while True:
        largest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_heap(values: MutableSequence[int]) -> None:
    """Rearrange ``values`` in place into a max heap."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        heapify(values, size, index)


def heap_sort(values: MutableSequence[int]) -> list[int]:
    """Return the values sorted in ascending order."""
    items = list(values)
    build_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


def _count(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def _is_complete(node: Optional[TreeNode], index: int, total: int) -> bool:
    if node is None:
        return True
    if index > total:
        return False
    return _is_complete(node.left, 2 * index, total) and _is_complete(
        node.right, 2 * index + 1, total
    )


def _max_order(node: Optional[TreeNode]) -> bool:
    if node is None:
        return True
    if not (_max_order(node.left) and _max_order(node.right)):
        return False
    if node.left is None and node.right is None:
        return True
    if node.left is not None and node.right is None:
        return node.data > node.left.data
    if node.left is not None and node.right is not None:
        return node.data > node.left.data and node.data > node.right.data
    return False


def is_max_heap(root: Optional[TreeNode]) -> bool:
    """True when the tree is complete and every parent exceeds its children."""
    total = _count(root)
    return _is_complete(root, 1, total) and _max_order(root)
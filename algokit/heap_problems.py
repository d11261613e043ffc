"""Heap-based problems: ordering, selection, merging and streaming medians."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import count
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    val: int
    next: Optional["ListNode"] = None


class MedianStream:
    """Running median of a stream of integers kept in two heaps."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max heap, values negated
        self._high: list[int] = []  # min heap
        self._median = 0.0

    def add(self, value: int) -> float:
        """Add ``value`` and return the updated median."""
        low, high = self._low, self._high
        if len(high) == len(low):
            if value > self._median:
                heapq.heappush(high, value)
                self._median = float(high[0])
            else:
                heapq.heappush(low, -value)
                self._median = float(-low[0])
        elif len(high) > len(low):
            if value > self._median:
                moved = heapq.heapreplace(high, value)
                heapq.heappush(low, -moved)
            else:
                heapq.heappush(low, -value)
            self._median = (high[0] - low[0]) / 2.0
        else:
            if value > self._median:
                heapq.heappush(high, value)
            else:
                moved = -heapq.heapreplace(low, -value)
                heapq.heappush(high, moved)
            self._median = (high[0] - low[0]) / 2.0
        return self._median

    def median(self) -> float:
        """Current median; 0.0 before any value has been added."""
        return self._median

    def __len__(self) -> int:
        return len(self._low) + len(self._high)


def running_medians(values: Iterable[int]) -> list[float]:
    """Median after each value of ``values`` is added."""
    stream = MedianStream()
    return [stream.add(value) for value in values]


def sort_pairs(pairs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort by first item ascending, breaking ties by second item descending."""
    return sorted((tuple(pair) for pair in pairs), key=lambda p: (p[0], -p[1]))


def min_stone_sum(piles: Iterable[int], k: int) -> int:
    """Total stones left after ``k`` times halving (rounding down the removal) the largest pile."""
    heap = [-pile for pile in piles]
    if not heap:
        return 0
    heapq.heapify(heap)
    for _ in range(k):
        largest = -heap[0]
        heapq.heapreplace(heap, -(largest - largest // 2))
    return -sum(heap)


def reorganize_string(s: str) -> str:
    """Rearrange ``s`` so no two neighbours are equal, or return "" if impossible."""
    heap = [(-freq, ch) for ch, freq in Counter(s).items()]
    heapq.heapify(heap)
    out: list[str] = []
    while len(heap) > 1:
        first_count, first = heapq.heappop(heap)
        second_count, second = heapq.heappop(heap)
        out.append(first)
        out.append(second)
        if first_count + 1:
            heapq.heappush(heap, (first_count + 1, first))
        if second_count + 1:
            heapq.heappush(heap, (second_count + 1, second))
    if heap:
        remaining, ch = heap[0]
        if remaining != -1:
            return ""
        out.append(ch)
    return "".join(out)


def _check_k(values: Sequence[int], k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")


def kth_smallest(values: Sequence[int], k: int) -> int:
    """The k-th smallest value, using a max heap of size k."""
    _check_k(values, k)
    heap = [-value for value in values[:k]]
    heapq.heapify(heap)
    for value in values[k:]:
        if value < -heap[0]:
            heapq.heapreplace(heap, -value)
    return -heap[0]


def kth_greatest(values: Sequence[int], k: int) -> int:
    """The k-th greatest value, using a min heap of size k."""
    _check_k(values, k)
    heap = list(values[:k])
    heapq.heapify(heap)
    for value in values[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


def merge_k_sorted_arrays(arrays: Iterable[Sequence[int]]) -> list[int]:
    """Merge already sorted arrays into one sorted list."""
    rows = [list(row) for row in arrays]
    heap = [(row[0], index, 0) for index, row in enumerate(rows) if row]
    heapq.heapify(heap)
    merged: list[int] = []
    while heap:
        value, row, col = heapq.heappop(heap)
        merged.append(value)
        if col + 1 < len(rows[row]):
            heapq.heappush(heap, (rows[row][col + 1], row, col + 1))
    return merged


def merge_k_sorted_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Relink already sorted linked lists into one sorted list and return its head."""
    order = count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    while heap:
        _, _, node = heapq.heappop(heap)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    return head
"""Backtracking and divide-and-conquer problems: subsequences, sorting, N queens."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional


def _subsequences(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every subsequence, trying "take" before "skip" at each position."""
    chosen: list[int] = []

    def walk(index: int) -> Iterator[list[int]]:
        if index >= len(values):
            yield list(chosen)
            return
        chosen.append(values[index])
        yield from walk(index + 1)
        chosen.pop()
        yield from walk(index + 1)

    return walk(0)


def all_subsequences(values: Sequence[int]) -> list[list[int]]:
    """Every subsequence of ``values``, including the empty one."""
    return list(_subsequences(values))


def subsequences_with_sum(values: Sequence[int], target: int) -> list[list[int]]:
    """Every subsequence whose items add up to ``target``."""
    return [seq for seq in _subsequences(values) if sum(seq) == target]


def first_subsequence_with_sum(values: Sequence[int], target: int) -> Optional[list[int]]:
    """The first subsequence (in take-before-skip order) adding up to ``target``."""
    return next((seq for seq in _subsequences(values) if sum(seq) == target), None)


def count_subsequences_with_sum(values: Sequence[int], target: int) -> int:
    """Number of subsequences whose items add up to ``target``."""

    def count(index: int, total: int) -> int:
        if index >= len(values):
            return 1 if total == target else 0
        return count(index + 1, total + values[index]) + count(index + 1, total)

    return count(0, 0)


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """All combinations of candidates, each usable any number of times, summing to ``target``."""
    if any(candidate <= 0 for candidate in candidates):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    chosen: list[int] = []

    def solve(index: int, remaining: int) -> None:
        if index >= len(candidates):
            if remaining == 0:
                results.append(list(chosen))
            return
        candidate = candidates[index]
        if candidate <= remaining:
            chosen.append(candidate)
            solve(index, remaining - candidate)
            chosen.pop()
        solve(index + 1, remaining)

    solve(0, target)
    return results


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return the values sorted in ascending order; the input is left untouched."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i <= high - 1 and items[i] <= pivot:
            i += 1
        while j >= low + 1 and items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Sequence[int]) -> list[int]:
    """Return the values sorted in ascending order, partitioning around the first item."""
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            split = _partition(items, low, high)
            ranges.append((low, split - 1))
            ranges.append((split + 1, high))
    return items


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of 'Q' and '.'."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    board = [["."] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_sums: set[int] = set()
    used_diffs: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in used_rows or row + col in used_sums or col - row in used_diffs:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            used_sums.add(row + col)
            used_diffs.add(col - row)
            place(col + 1)
            board[row][col] = "."
            used_rows.discard(row)
            used_sums.discard(row + col)
            used_diffs.discard(col - row)

    place(0)
    return solutions
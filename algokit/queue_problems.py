"""Queue problems: reversal, interleaving, sliding windows and streams."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


def reverse_queue(queue: deque[int]) -> None:
    """Reverse the queue in place using a stack."""
    stack = []
    while queue:
        stack.append(queue.popleft())
    while stack:
        queue.append(stack.pop())


def reverse_first_k(queue: deque[int], k: int) -> None:
    """Reverse the first ``k`` items in place; nothing changes when k is 0 or too large."""
    if k < 0:
        raise ValueError("k must not be negative")
    size = len(queue)
    if k == 0 or k > size:
        return
    stack = [queue.popleft() for _ in range(k)]
    while stack:
        queue.append(stack.pop())
    queue.rotate(k - size)


def interleave_halves(queue: deque[int]) -> None:
    """Interleave the first half with the second half in place.

    With an odd count the second half holds the extra item, which ends up last.
    """
    size = len(queue)
    if size < 2:
        return
    half = size // 2
    first = [queue.popleft() for _ in range(half)]
    second = list(queue)
    queue.clear()
    for a, b in zip(first, second):
        queue.append(a)
        queue.append(b)
    queue.extend(second[half:])


def first_negative_in_windows(values: Sequence[int], k: int) -> list[int]:
    """First negative value of each window of size ``k``, or 0 when it has none."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")
    negatives: deque[int] = deque(i for i in range(k) if values[i] < 0)
    answers: list[int] = []
    for i in range(k, len(values)):
        answers.append(values[negatives[0]] if negatives else 0)
        while negatives and negatives[0] <= i - k:
            negatives.popleft()
        if values[i] < 0:
            negatives.append(i)
    answers.append(values[negatives[0]] if negatives else 0)
    return answers


def first_non_repeating(stream: Iterable[str]) -> str:
    """After each character, the first one seen only once so far, or '#'."""
    freq: Counter[str] = Counter()
    pending: deque[str] = deque()
    out: list[str] = []
    for ch in stream:
        freq[ch] += 1
        pending.append(ch)
        while pending and freq[pending[0]] > 1:
            pending.popleft()
        out.append(pending[0] if pending else "#")
    return "".join(out)


def min_groups(intervals: Iterable[Sequence[int]]) -> int:
    """Count groups formed by repeatedly taking the first sorted interval.

    Each round removes the first remaining interval and every interval that
    starts after its end.
    """
    remaining = sorted(tuple(interval) for interval in intervals)
    groups = 0
    while remaining:
        groups += 1
        end = remaining.pop(0)[1]
        remaining = [interval for interval in remaining if interval[0] <= end]
    return groups
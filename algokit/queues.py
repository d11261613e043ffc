"""Fixed-capacity queues and a deque backed by a list of slots."""

from __future__ import annotations

from typing import Any, Optional


class QueueFullError(Exception):
    """Raised when an item is pushed onto a queue with no free slot."""


class QueueEmptyError(Exception):
    """Raised when an item is read or removed from an empty queue."""


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")


class ArrayQueue:
    """A linear queue over a fixed number of slots.

    Slots freed at the front are reused only once the queue becomes empty.
    """

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._slots: list[Optional[Any]] = [None] * size
        self._front = 0
        self._rear = 0

    def push(self, data: Any) -> None:
        """Append ``data`` at the rear."""
        if self._rear == self.size:
            raise QueueFullError("queue is full")
        self._slots[self._rear] = data
        self._rear += 1

    def pop(self) -> Any:
        """Remove and return the front item."""
        if self._front == self._rear:
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        if self._front == self._rear:
            self._front = self._rear = 0
        return value

    def front(self) -> Any:
        """Return the front item without removing it."""
        if self._front == self._rear:
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def __len__(self) -> int:
        return self._rear - self._front


class _Ring:
    """Shared slot bookkeeping for the circular queue and the deque."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._slots: list[Optional[Any]] = [None] * size
        self._front = -1
        self._rear = -1

    def _full_for_rear(self) -> bool:
        return (self._front == 0 and self._rear == self.size - 1) or (
            self._rear == self._front - 1
        )

    def _push_rear(self, data: Any) -> None:
        if self._full_for_rear():
            raise QueueFullError("queue is full")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._rear == self.size - 1 and self._front != 0:
            self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = data

    def _reset_single(self) -> Any:
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._rear = -1
        return value

    def _pop_front(self) -> Any:
        if self._front == -1:
            raise QueueEmptyError("queue is empty")
        if self._front == self._rear:
            return self._reset_single()
        value = self._slots[self._front]
        if self._front == self.size - 1:
            self._front = 0
        else:
            self._slots[self._front] = None
            self._front += 1
        return value

    def _count(self) -> int:
        if self._front == -1:
            return 0
        if self._rear >= self._front:
            return self._rear - self._front + 1
        return self.size - self._front + self._rear + 1

    def slots(self) -> list[Optional[Any]]:
        """A copy of the underlying slots; unused ones hold None."""
        return list(self._slots)


class CircularQueue(_Ring):
    """A queue whose rear wraps around to reuse freed slots."""

    def push(self, data: Any) -> None:
        """Append ``data`` at the rear."""
        self._push_rear(data)

    def pop(self) -> Any:
        """Remove and return the front item."""
        return self._pop_front()

    def __len__(self) -> int:
        return self._count()

    def slots(self) -> list[Optional[Any]]:
        """A copy of the underlying slots; unused ones hold None."""
        return super().slots()


class ArrayDeque(_Ring):
    """A double-ended queue over a fixed ring of slots."""

    def push_rear(self, data: Any) -> None:
        """Append ``data`` at the rear."""
        self._push_rear(data)

    def push_front(self, data: Any) -> None:
        """Prepend ``data`` at the front."""
        if (self._front == 0 and self._rear == self.size - 1) or (
            self._rear == self._front + 1
        ):
            raise QueueFullError("deque is full")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._front == 0 and self._rear != self.size - 1:
            self._front = self.size - 1
        else:
            self._front -= 1
        self._slots[self._front] = data

    def pop_front(self) -> Any:
        """Remove and return the front item."""
        return self._pop_front()

    def pop_rear(self) -> Any:
        """Remove and return the rear item."""
        if self._front == -1:
            raise QueueEmptyError("deque is empty")
        if self._front == self._rear:
            return self._reset_single()
        value = self._slots[self._rear]
        if self._rear == 0:
            self._rear = self.size - 1
        else:
            self._slots[self._rear] = None
            self._rear -= 1
        return value

    def slots(self) -> list[Optional[Any]]:
        """A copy of the underlying slots; unused ones hold None."""
        return super().slots()
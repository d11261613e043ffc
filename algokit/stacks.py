"""Fixed-capacity stacks, including two stacks sharing one set of slots."""

from __future__ import annotations

from typing import Any, Optional


class StackOverflowError(Exception):
    """Raised when pushing onto a stack with no free slot."""


class StackUnderflowError(Exception):
    """Raised when reading or removing from an empty stack."""


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")


class ArrayStack:
    """A stack holding at most ``size`` items."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        if len(self._items) >= self.size:
            raise StackOverflowError("stack is full")
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class TwoStacks:
    """Two stacks growing towards each other from both ends of shared slots."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._slots: list[Optional[Any]] = [None] * size
        self._top1 = -1
        self._top2 = size

    def _has_room(self) -> bool:
        return self._top2 - self._top1 > 1

    def push1(self, data: Any) -> None:
        """Push onto the first stack."""
        if not self._has_room():
            raise StackOverflowError("no free slot left")
        self._top1 += 1
        self._slots[self._top1] = data

    def push2(self, data: Any) -> None:
        """Push onto the second stack."""
        if not self._has_room():
            raise StackOverflowError("no free slot left")
        self._top2 -= 1
        self._slots[self._top2] = data

    def pop1(self) -> Any:
        """Remove and return the top of the first stack."""
        value = self.top1()
        self._slots[self._top1] = None
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Remove and return the top of the second stack."""
        value = self.top2()
        self._slots[self._top2] = None
        self._top2 += 1
        return value

    def top1(self) -> Any:
        """Top of the first stack."""
        if self._top1 == -1:
            raise StackUnderflowError("stack 1 is empty")
        return self._slots[self._top1]

    def top2(self) -> Any:
        """Top of the second stack."""
        if self._top2 == self.size:
            raise StackUnderflowError("stack 2 is empty")
        return self._slots[self._top2]
"""Stack problems; a stack is a list whose last item is the top."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())
_OPERATORS = frozenset("+-*/")


def get_middle(stack: Sequence[Any]) -> Any:
    """The item at position ``len // 2`` counted from the bottom."""
    if not stack:
        raise IndexError("middle of an empty stack")
    return stack[len(stack) // 2]


def insert_at_bottom(stack: list[Any], value: Any) -> None:
    """Place ``value`` below every other item, in place."""
    stack.insert(0, value)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse the stack in place."""
    stack.reverse()


def sort_stack(stack: list[Any]) -> None:
    """Sort in place so the smallest item is on top."""
    stack.sort(reverse=True)


def is_valid_parentheses(s: str) -> bool:
    """True when every bracket is closed by its matching kind in order.

    Any character that is not an opening bracket is treated as a closer.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def has_redundant_brackets(expression: str) -> bool:
    """True when some pair of parentheses encloses no operator."""
    stack: list[str] = []
    for ch in expression:
        if ch != ")":
            stack.append(ch)
            continue
        if not stack:
            raise ValueError("unbalanced closing parenthesis")
        top = stack.pop()
        has_operator = False
        while stack and top != "(":
            if top in _OPERATORS:
                has_operator = True
            top = stack.pop()
        if not has_operator:
            return True
    return False


def next_smaller(values: Sequence[int]) -> list[int]:
    """For each value, the nearest smaller value to its right, or -1."""
    answers = [-1] * len(values)
    stack: list[int] = []
    for index in reversed(range(len(values))):
        current = values[index]
        while stack and stack[-1] >= current:
            stack.pop()
        answers[index] = stack[-1] if stack else -1
        stack.append(current)
    return answers


def prev_smaller(values: Sequence[int]) -> list[int]:
    """For each value, the nearest smaller value to its left, or -1."""
    answers: list[int] = []
    stack: list[int] = []
    for current in values:
        while stack and stack[-1] >= current:
            stack.pop()
        answers.append(stack[-1] if stack else -1)
        stack.append(current)
    return answers
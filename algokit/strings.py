"""String problems: searching, reversing, digit addition and substrings."""

from __future__ import annotations

from itertools import zip_longest

_DIGITS = "0123456789"


def last_occurrence(text: str, ch: str) -> int:
    """Index of the last ``ch`` in ``text``, or -1 when it does not occur."""
    if len(ch) != 1:
        raise ValueError("ch must be a single character")
    return text.rfind(ch)


def reverse_string(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]


def add_strings(num1: str, num2: str) -> str:
    """Sum of two non-negative decimal numbers given as digit strings."""
    for number in (num1, num2):
        if any(ch not in _DIGITS for ch in number):
            raise ValueError(f"not a decimal digit string: {number!r}")
    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same backwards."""
    return text == text[::-1]


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly remove the leftmost ``part`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        longest = max(longest, index - start + 1)
    return longest
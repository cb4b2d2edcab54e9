"""
Signed comparisons used by the records' natural orders.

Each helper returns a negative, zero or positive int. Magnitudes carry meaning: natural
orders add partial results together, and the matcher squares them.
"""
from __future__ import annotations

from datetime import date
from enum import Enum


def compare_ints(a: int, b: int) -> int:
    return (a > b) - (a < b)


def compare_strings(a: str, b: str) -> int:
    """Difference of the first differing characters, else the difference in length."""
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    return len(a) - len(b)


def compare_dates(a: date, b: date) -> int:
    return (a.year - b.year) or (a.month - b.month) or (a.day - b.day)


def compare_members(a: Enum, b: Enum) -> int:
    """Difference in declaration position of two members of the same enum."""
    members = list(type(a))
    return members.index(a) - members.index(b)

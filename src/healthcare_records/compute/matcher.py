"""
Closest-match lookup over records ordered by their natural order.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from healthcare_records.models.record import Record

T = TypeVar("T", bound=Record)


def mean_squared_error(first: Record, second: Record) -> int:
    error = first.compare_to(second)
    return error ** 2 // 2


def closest_match(data: Iterable[T], target: T) -> T | None:
    """Element of `data` with the smallest squared comparison error to `target`."""
    return min(data, key=lambda candidate: mean_squared_error(candidate, target), default=None)

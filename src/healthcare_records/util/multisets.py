"""
Collection helpers built on frequency counting.

`multiset_compare` is the overlap measure used as the natural order of ailments. It is an
ordering *measure*, not a comparator in the usual sense:

- it is never negative, so it is not anti-symmetric;
- two equal non-empty multisets compare as a positive number, not zero;
- an empty first argument always gives 0.

Callers rely on its numeric scale; do not normalise it to -1/0/1.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Collection, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def frequency(collection: Iterable, obj) -> int:
    """Number of elements of `collection` equal to `obj`."""
    return sum(1 for element in collection if element == obj)


def multiset_compare(a: Collection, b: Collection) -> int:
    """|a| + sum of frequency(x, b) for every occurrence x in a."""
    b = list(b)
    return len(a) + sum(frequency(b, x) for x in a)


def occurrences(iterable: Iterable[T]) -> Counter:
    return Counter(iterable)


def least_common(iterable: Iterable[T]) -> T | None:
    """Element with the fewest occurrences; first seen wins ties."""
    counts = occurrences(iterable)
    if not counts:
        return None
    return min(counts, key=counts.__getitem__)


def most_common(iterable: Iterable[T]) -> T | None:
    counts = occurrences(iterable)
    if not counts:
        return None
    return counts.most_common(1)[0][0]


def flat_union(iterable: Iterable[T], mapper: Callable[[T], Iterable[R]]) -> set[R]:
    """Union of the collections produced by `mapper` for each element."""
    out: set = set()
    for element in iterable:
        out.update(mapper(element))
    return out


def intersection(a: Iterable[Hashable], b: Iterable[Hashable]) -> set:
    b = list(b)
    return {element for element in a if element in b}

"""
Lazy enumeration of multisets (combinations with repetition).

The enumerator works on positions, not values: if the same value appears
twice in the alphabet, equal multisets are produced more than once. Callers
that start from raw inventory lists should pass the distinct values only.
"""

import math
from collections.abc import Iterator, Mapping, Sequence
from typing import TypeVar

T = TypeVar("T")


def count_multisets(set_length: int, size: int) -> int:
    """
    Number of multisets of the given size drawn from set_length distinct values.

    Stars and bars: C(set_length + size - 1, size).
    """
    if size == 0:
        return 1
    if set_length == 0:
        return 0
    return math.comb(set_length + size - 1, size)


def iter_multisets(
    alphabet: Sequence[T],
    size: int,
    max_counts: Mapping[T, int] | None = None,
) -> Iterator[tuple[T, ...]]:
    """
    Yield every multiset of exactly `size` elements drawn from `alphabet`.

    Each call returns an independent generator, so iterating twice with the
    same arguments reproduces the same sequence. Nothing is materialized up
    front; callers may stop iterating at any point.

    Args:
        alphabet: Values to draw from (pass distinct values)
        size: Number of elements in each multiset
        max_counts: Optional cap on copies per value. Values missing from the
            mapping may not be used at all.

    Yields:
        Tuples of length `size`, values grouped in alphabet order
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return _multisets(tuple(alphabet), 0, size, max_counts)


def _multisets(
    alphabet: tuple[T, ...],
    start: int,
    size: int,
    max_counts: Mapping[T, int] | None,
) -> Iterator[tuple[T, ...]]:
    if size == 0:
        yield ()
        return
    if start >= len(alphabet):
        return

    value = alphabet[start]
    limit = size if max_counts is None else min(size, max_counts.get(value, 0))

    # Take `value` 0..limit times, fill the rest from the remaining alphabet
    for copies in range(limit + 1):
        prefix = (value,) * copies
        for rest in _multisets(alphabet, start + 1, size - copies, max_counts):
            yield prefix + rest

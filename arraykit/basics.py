"""Elementary operations on sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import pairwise
from typing import Any, NamedTuple, TypeVar

T = TypeVar("T")


class EvenOddCount(NamedTuple):
    """Counts of even and odd integers."""

    even: int
    odd: int


def average(values: Sequence[float]) -> float:
    """Return the arithmetic mean. Raises ValueError on an empty sequence."""
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(values) / len(values)


def is_sorted(values: Iterable[Any]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(left <= right for left, right in pairwise(values))


def copy_array(values: Iterable[T]) -> list[T]:
    """Return a new list holding the same elements."""
    return list(values)


def count_even_odd(values: Iterable[int]) -> EvenOddCount:
    """Count the even and odd integers in ``values``."""
    even = odd = 0
    for value in values:
        if value % 2 == 0:
            even += 1
        else:
            odd += 1
    return EvenOddCount(even, odd)


def linear_search(values: Iterable[T], target: T) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next(
        (index for index, value in enumerate(values) if value == target), None
    )


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse ``values`` in place by swapping from both ends."""
    left, right = 0, len(values) - 1
    while left < right:
        values[left], values[right] = values[right], values[left]
        left += 1
        right -= 1


def smallest(values: Iterable[T]) -> T:
    """Return the smallest element. Raises ValueError on an empty input."""
    iterator = iter(values)
    try:
        result = next(iterator)
    except StopIteration:
        raise ValueError("smallest of an empty sequence") from None
    for value in iterator:
        if value < result:
            result = value
    return result


def total(values: Iterable[int]) -> int:
    """Return the sum of all elements."""
    return sum(values)